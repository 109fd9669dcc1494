"""Constants shared by the engine, the formatter and the command line."""


class ModeNames:
    """Movement mode identifiers accepted by the policy registry."""

    LUCK = "luck"
    """Every peg is an independent fair coin flip."""

    SKILL = "skill"
    """Beans go right ``skill_level`` times, then left."""


# Probability of a right turn used to derive the skill distribution
RIGHT_PROBABILITY = 0.5

# Steps taken counter value for a bean entering the board
INITIAL_STEPS_TAKEN = 1

# Columns between pegs in the text rendering (must be odd)
DEFAULT_SPACING = 3

USAGE_EXAMPLES = (
    "Example: beancounter 10 400 luck\n"
    "Example: beancounter 20 1000 skill debug"
)
