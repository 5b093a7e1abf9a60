# quiz_core/rubric.py
from types import MappingProxyType

OPTION_SCORES = MappingProxyType({
    "Not familiar at all": 1, "Never": 1, "Not important at all": 1,
    "Strongly Disagree": 1, "Strongly disagree": 1, "Not likely at all": 1,

    "Somewhat familiar": 2, "Rarely": 2, "Somewhat important": 2,
    "Disagree": 2, "Somewhat Likely": 2,

    "Neutral": 3, "Occasionally": 3,

    "Fairly familiar": 4, "Frequently": 4, "Fairly important": 4,
    "Agree": 4, "Fairly likely": 4,

    "Very familiar": 5, "Almost Always": 5, "Very important": 5,
    "Strongly Agree": 5, "Strongly agree": 5, "Very likely": 5,
})
NEUTRAL_SCORE = 3

QUESTION_CATEGORIES = MappingProxyType({
    1: ("Openness",),
    2: ("Conscientiousness",),
    3: ("Agreeableness",),
    4: ("Extraversion",),
    5: ("Conscientiousness",),
    6: ("Conscientiousness",),
    7: ("Agreeableness",),
    8: ("Extraversion",),
    9: ("Openness",),
    10: ("Reflection",),
})

STYLE_THRESHOLD = 4
# (category, learning style) in check order
STYLE_RULES = (
    ("Openness", "Visual"),
    ("Extraversion", "Auditory"),
    ("Conscientiousness", "Read/Write"),
    ("Agreeableness", "Kinesthetic"),
)
FALLBACK_STYLE = "Multimodal"

STRENGTHS = (
    ("Extraversion", "Communication and initiative"),
    ("Agreeableness", "Collaboration and empathy"),
    ("Conscientiousness", "Discipline and goal-setting"),
    ("Openness", "Curiosity and creativity"),
)

ACTIVITIES = (
    ("Visual", "Mind maps, diagrams, and visual summaries"),
    ("Auditory", "Discussions, presentations, and storytelling"),
    ("Read/Write", "Journaling, checklists, and structured notes"),
    ("Kinesthetic", "Role-play, experiments, and hands-on projects"),
)
