"""
Keyword tables and prose templates.

Every heuristic in the analyzer and every canned insertion in the enhancer
reads from the constants in this module. The tables are tuples, frozensets
and read-only mappings so they can be shared safely between calls.
"""

from types import MappingProxyType

# Narrative position cues (substring match, case-insensitive)
INTRODUCTION_MARKERS = (
    "began", "started", "first time", "introduction", "met", "once upon",
)
CLIMAX_MARKERS = (
    "finally", "suddenly", "at last", "climax", "confrontation", "face to face", "showdown",
)
RESOLUTION_MARKERS = (
    "ended", "finished", "resolved", "conclusion", "epilogue", "aftermath", "settled",
)

# Pronoun sets, compared against lowercased tokens
FIRST_PERSON_PRONOUNS = frozenset(["i", "me", "my", "mine", "we", "us", "our", "ours"])
SECOND_PERSON_PRONOUNS = frozenset(["you", "your", "yours"])
THIRD_PERSON_PRONOUNS = frozenset([
    "he", "him", "his", "she", "her", "hers", "they", "them", "their", "theirs",
])

# Scene type markers (case-sensitive substring scan)
DIALOGUE_TAGS = ("said", "asked", "replied", "responded", "shouted", "whispered")
ACTION_VERBS = (
    "ran", "jumped", "fought", "grabbed", "threw", "dodged",
    "attacked", "rushed", "lunged", "sprinted", "dashed",
)
SCENE_THRESHOLD = 5

# Mood
POSITIVE_MOOD_WORDS = (
    "happy", "joy", "love", "peace", "hope", "exciting", "beautiful", "pleased",
)
NEGATIVE_MOOD_WORDS = (
    "sad", "fear", "anger", "hate", "despair", "darkness", "tragic", "grim",
)
SUSPENSE_MOOD_WORDS = (
    "mysterious", "suspense", "tension", "anxious", "uncertain", "danger", "threat",
)

# Golden Shadow
PLOT_INDICATORS = (
    "remembered", "realized", "discovered", "decided", "planned",
    "secret", "mission", "quest", "journey", "task", "mystery",
)
UNDERDEVELOPED_MENTION_LIMIT = 2

# Environmental expansion
SENSORY_KEYWORDS = MappingProxyType({
    "visual": ("looked", "saw", "appeared", "watched", "color", "bright", "dark", "shape"),
    "auditory": ("heard", "sound", "noise", "listen", "whisper", "quiet", "loud", "silence"),
    "tactile": ("felt", "touch", "rough", "smooth", "texture", "warm", "cold", "soft", "hard"),
    "olfactory": ("smell", "scent", "aroma", "odor", "fragrance", "stench"),
})
SENSORY_CATEGORIES = ("visual", "auditory", "tactile", "olfactory")
SENSORY_RICHNESS_THRESHOLD = 3
SETTING_KEYWORDS = (
    "room", "building", "house", "landscape", "forest", "city", "street", "sky", "mountain",
)
# Used only to pick the paragraph that receives environmental detail
SETTING_LOCATOR_KEYWORDS = SETTING_KEYWORDS + ("field", "beach", "ocean", "river", "lake")

# Action scene enhancement
TIME_MANIPULATION_CUES = (
    "slow", "quickly", "moment", "instant", "suddenly", "time seemed", "freeze",
)
ACTION_SENSORY_CUES = (
    "felt", "heard", "saw", "smell", "taste", "pain", "heart pounding",
)
ENVIRONMENT_INTERACTION_CUES = (
    "against the", "through the", "over the", "under the", "from the",
)

# Prose smoothing
TRANSITION_WORDS = (
    "however", "therefore", "furthermore", "additionally", "consequently", "meanwhile",
)
TRANSITION_PHRASES = (
    "Meanwhile, ",
    "Furthermore, ",
    "In contrast, ",
    "Additionally, ",
    "Nevertheless, ",
    "Consequently, ",
    "Despite this, ",
    "Indeed, ",
    "Even so, ",
    "Simultaneously, ",
)
SENTENCE_VARIETY_THRESHOLD = 0.3

# Repetition
REPEATED_WORD_MIN_LENGTH = 4
REPEATED_WORD_THRESHOLD = 2
SEVERITY_WORD_THRESHOLD = 3
REPLACEMENT_MIN_LENGTH = 5
REPLACEMENT_RATIO = 0.6

SYNONYMS = MappingProxyType({
    "looked": ("gazed", "glanced", "observed", "stared", "watched", "eyed", "examined"),
    "walked": ("strode", "ambled", "moved", "stepped", "paced", "proceeded", "advanced"),
    "said": ("remarked", "stated", "explained", "noted", "commented", "expressed", "declared"),
    "felt": ("experienced", "sensed", "perceived", "noticed", "recognized", "registered"),
    "saw": ("noticed", "spotted", "observed", "caught sight of", "glimpsed", "discerned"),
    "went": ("proceeded", "moved", "traveled", "journeyed", "progressed", "headed"),
    "thought": ("considered", "reflected", "contemplated", "pondered", "mused", "supposed"),
    "knew": ("understood", "recognized", "realized", "comprehended", "acknowledged"),
    "heard": ("detected", "caught", "discerned", "distinguished", "perceived"),
    "face": ("countenance", "visage", "features", "expression", "aspect"),
})

# Prose templates
CHARACTER_DEPTH_TEMPLATE = (
    " {name}'s expression betrayed a hint of the complex emotions beneath the surface. "
    "There was history there, untold stories written in the subtle lines around the eyes "
    "and the particular way they held their shoulders."
)

PLOT_STAKES_PARAGRAPH = (
    "The implications of recent events weighed heavily, connections forming between "
    "seemingly disparate threads. There was more at stake than initially apparent, layers "
    "of meaning and consequence that stretched beyond the immediate moment. What might have "
    "seemed a small decision now cast a longer shadow, its significance magnified by context "
    "and circumstance."
)

SENSORY_TEMPLATES = MappingProxyType({
    "visual": (
        "The light filtered through in muted beams, casting long shadows across the space "
        "and highlighting dust motes that danced in perpetual, aimless motion. Colors shifted "
        "subtly with each passing cloud, from warm amber to cool silver."
    ),
    "auditory": (
        "The ambient sounds formed a textured backdrop, distant conversations merging with "
        "closer movements and occasional laughter punctuating the steady rhythm of existence. "
        "Somewhere, barely perceptible, a faint mechanical hum provided continuity."
    ),
    "tactile": (
        "The air carried a distinct weight and temperature, cool against exposed skin but not "
        "uncomfortable. Surfaces presented a contrast of textures, smooth here and rough there, "
        "with unexpected variations that registered subtly against fingertips."
    ),
    "olfactory": (
        "Scents layered themselves in complex patterns: the sharp freshness of recently "
        "disturbed greenery, underlying notes of dampness from recent rain, and traces of "
        "something indefinable but distinctly organic."
    ),
})

MUNDANE_OBJECT_PARAGRAPH = (
    "A single, unremarkable object stood witness to it all: an old timepiece resting on the "
    "nearest surface. Its brass casing had developed a patina that spoke of countless hands "
    "and years of existence. The once-precise mechanism now ticked with a slight arrhythmia, "
    "each sound a miniature testament to entropy's patient work. Small scratches mapped an "
    "unknown history across its face, while fingerprints both fresh and ancient layered its "
    "surface with human testimony."
)

TIME_DILATION_SENTENCE = (
    " Time seemed to slow, each second stretching into an eternity of hyperclarity where "
    "every detail registered with impossible precision. The moment hung suspended in a bubble "
    "of heightened awareness."
)
HEIGHTENED_SENSES_SENTENCE = (
    " A surge of adrenaline sharpened every sense: the thundering heartbeat drowning out all "
    "but the most immediate sounds, the metallic taste of fear coating the tongue, muscles "
    "burning with the strain of movement pushed beyond normal limits."
)
ENVIRONMENT_PARTICIPANT_SENTENCE = (
    " The environment itself became both obstacle and weapon, surfaces transforming into "
    "tactical elements to be used or avoided. Each interaction with the surroundings sent "
    "cascades of secondary effects rippling outward: dust clouds rising from impact, objects "
    "clattering aside, surfaces trembling under sudden force."
)
STILLNESS_CONTRAST_SENTENCE = (
    " Then, briefly, a moment of perfect stillness, a single heartbeat of absolute clarity "
    "before motion erupted again with renewed intensity."
)

CLOSING_REFLECTION_PARAGRAPH = (
    "The subtle details of this moment would remain etched in memory long after other "
    "experiences had faded. There was something uniquely significant about it, something "
    "that transcended ordinary perception and touched upon deeper truths."
)

# Technique display names, in pipeline order
TECHNIQUE_NAMES = MappingProxyType({
    "golden_shadow": "Golden Shadow Enhancement",
    "environmental": "Environmental Expansion",
    "action_scene": "Action Scene Enhancement",
    "prose_smoother": "Prose Smoothing",
    "repetition_elimination": "Repetition Elimination",
})
