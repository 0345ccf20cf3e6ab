"""
Non-Transitive Dice - a provably fair dice game against the computer.

Every random decision (who moves first, every roll) is made with a
commit-reveal exchange: the computer publishes an HMAC of its number before
the user adds theirs, then reveals the key so the round can be audited.
"""

__version__ = "1.0.0"
