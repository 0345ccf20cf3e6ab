from fractions import Fraction

from tabulate import tabulate

from .dice import Die

DIAGONAL = Fraction(1, 2)


# ==============================================================================
# Probability calculation logic
# ==============================================================================

def win_probability(die1: Die, die2: Die) -> Fraction:
    """Exact P(die1 rolls strictly higher than die2), over every pair of faces."""
    wins = sum(1 for f1 in die1.faces for f2 in die2.faces if f1 > f2)
    return Fraction(wins, len(die1) * len(die2))


def beats(die1: Die, die2: Die) -> bool:
    return win_probability(die1, die2) > DIAGONAL


def probability_matrix(dice) -> list[list[Fraction]]:
    """matrix[i][j] is P(dice[i] > dice[j]); the diagonal is fixed at 1/2."""
    dice = list(dice)
    return [
        [DIAGONAL if i == j else win_probability(a, b) for j, b in enumerate(dice)]
        for i, a in enumerate(dice)
    ]


def is_nontransitive(dice) -> bool:
    """True when every die in the set is beaten by at least one other die."""
    dice = list(dice)
    if len(dice) < 2:
        return False
    return all(any(beats(other, die) for other in dice if other is not die) for die in dice)


# ==============================================================================
# Help table generation
# ==============================================================================

class HelpTableGenerator:
    @staticmethod
    def generate_table(dice) -> str:
        dice = list(dice)
        matrix = probability_matrix(dice)
        headers = ["User v PC >"] + [d.label for d in dice]
        table_data = []
        for i, user_die in enumerate(dice):
            row = [f"{user_die.label} [{user_die}]"]
            for j, prob in enumerate(matrix[i]):
                cell = f"- ({float(prob):.4f})" if i == j else f"{float(prob):.4f}"
                row.append(cell)
            table_data.append(row)

        intro = (
            "\n--- Win Probability Table ---\n"
            "Each cell shows the probability that the User's die (row) beats the PC's die (column).\n"
            "The diagonal is a die against itself and is shown as 0.5 for symmetry.\n"
        )
        faces = "\n".join(f"{d.label}: [{d}]" for d in dice)
        table = tabulate(table_data, headers=headers, tablefmt="grid", disable_numparse=True)
        return f"{intro}{table}\n\nDice configurations:\n{faces}"
