"""Static content banks for generated readings.

Briefings rotate by day of year within each sign; every other bank is drawn
from by the seeded stream in :mod:`celestine.reading`.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple


class TransitTemplate(NamedTuple):
    label: str
    symbol: str
    descriptions: tuple[str, ...]


BRIEFING_TEMPLATES = MappingProxyType({
    "Aries": (
        "Cardinal fire moves through your chart today and your boldest plans feel within reach. "
        "Begin before you feel ready; the momentum will find you.",
        "Mars asks for courage with a softer edge today. "
        "Put your force into building rather than battling, and the day pays you back.",
        "Your warmth draws people in today. Share it freely. "
        "A spontaneous detour may end up being the best part of the week.",
        "The first impulse carries the clearest signal today. "
        "Act on it before doubt has time to settle in.",
        "Fresh starts and direct conversations are favored. "
        "Say the thing plainly; people are ready to hear it.",
        "What you start now keeps moving long after today. "
        "Pick the one project that deserves that momentum and give it your best hours.",
    ),
    "Taurus": (
        "The day runs at your pace: steady and rich. "
        "Small pleasures carry real weight, so let yourself enjoy them without hurry.",
        "Venus sharpens your senses and your taste. "
        "Trust what feels right in your body; it knows before your mind catches up.",
        "Patient effort compounds today. "
        "What you tend carefully now grows into something solid.",
        "Others lean on your calm today. "
        "Ground yourself in routine and let the world settle around you.",
        "A good day to invest in things that last: craft, comfort, and people who stay. "
        "Skip what is merely quick.",
        "Work planted weeks ago shows its first results. "
        "Resist the urge to rush it; your timing is right even when it feels slow.",
    ),
    "Gemini": (
        "Your mind is quick and generous today. "
        "Follow the conversation that lights you up; it leads somewhere useful.",
        "Mercury hands you the right words at the right moment. "
        "Write down the idea that arrives sideways.",
        "Curiosity is your compass. "
        "One question asked without agenda opens a door you did not know was there.",
        "Two paths look equally bright today. "
        "You do not have to choose yet; gather a little more and the answer clarifies.",
        "News or a message shifts the mood in your favor. "
        "Reply with warmth and you gain an ally.",
        "Learning comes easily now. "
        "Pick up the book, course, or skill you keep postponing and give it an hour.",
    ),
    "Cancer": (
        "The Moon turns your attention homeward today. "
        "Caring for your own space is the foundation for everything else.",
        "Your intuition reads the room before anyone speaks. "
        "Trust it, and speak up gently when something feels off.",
        "Old memories surface with new meaning. "
        "Let them inform today rather than pull you back into yesterday.",
        "Someone close needs your steadiness. "
        "Offer it, and remember to take some for yourself too.",
        "A quiet evening restores more than a busy one would. "
        "Protect it.",
        "Emotional honesty clears a path that logic could not. "
        "Name what you feel and the next step shows itself.",
    ),
    "Leo": (
        "The Sun backs your presence today. "
        "Step forward; being seen is part of the work, not a distraction from it.",
        "Creative energy runs high. "
        "Make something for the joy of it and let the audience take care of itself.",
        "Generosity comes back to you quickly today. "
        "Praise freely and watch the room warm up.",
        "A leadership moment arrives without announcement. "
        "Take it with a light touch and people follow willingly.",
        "Play is productive today. "
        "Give yourself permission to enjoy what you are building.",
        "Your confidence steadies others. "
        "Use it to lift someone who is doubting themselves.",
    ),
    "Virgo": (
        "Details line up in your favor today. "
        "The small fix you make now saves hours later.",
        "Mercury sharpens your judgment. "
        "Edit, refine, and trim; less will say more.",
        "Your care shows up as practical help today. "
        "Offer it, and accept thanks without deflecting.",
        "A routine you adjust now supports you for weeks. "
        "Start with sleep or the first hour of the morning.",
        "Good enough is genuinely good today. "
        "Ship it and let feedback do the rest of the polishing.",
        "Order in your surroundings brings order to your thinking. "
        "Clear one surface and notice the difference.",
    ),
    "Libra": (
        "Venus smooths the edges of every exchange today. "
        "Negotiations and reconciliations go better than expected.",
        "Beauty is not a luxury for you today; it is information. "
        "Pay attention to what pleases you.",
        "A partnership asks for balance. "
        "Say what you need as clearly as you listen to what they need.",
        "Your sense of fairness is needed somewhere. "
        "Offer it calmly and it carries weight.",
        "A decision you have weighed long enough can be made today. "
        "Trust the scale you have built.",
        "Social energy is bright. "
        "One good conversation is worth more than a dozen polite ones.",
    ),
    "Scorpio": (
        "Your focus cuts straight to what matters today. "
        "Use it on the one thing you have been circling.",
        "Pluto stirs something beneath the surface. "
        "Let it come up; what you name loses its grip on you.",
        "Trust is built in small, quiet moves today. "
        "Show up exactly as you said you would.",
        "Intensity is an asset when it is aimed. "
        "Choose your target before the day chooses it for you.",
        "Something ends so something better can start. "
        "Let it go cleanly.",
        "Your instincts about people are sharp today. "
        "Listen to them, and keep your own counsel until you are sure.",
    ),
    "Sagittarius": (
        "Jupiter widens the horizon today. "
        "Say yes to the invitation that feels a little too big.",
        "A new idea or place refreshes you. "
        "Even a short detour counts as exploration.",
        "Your honesty lands well today when it comes with humor. "
        "Speak plainly and smile.",
        "Learning and teaching blur together. "
        "Share what you know and you will learn something back.",
        "Optimism is practical today. "
        "It gets you moving, and moving is what the day rewards.",
        "The bigger picture comes into focus. "
        "Let one long-range goal guide today's small choices.",
    ),
    "Capricorn": (
        "Saturn rewards steady effort today. "
        "One solid step beats three hurried ones.",
        "Your long game is paying off. "
        "Take a moment to notice how far the structure you built has carried you.",
        "Responsibility sits well on you today. "
        "Delegate what others can carry so you can focus on what only you can do.",
        "A practical decision made now saves a lot of worry later. "
        "Decide and move on.",
        "Respect grows quietly around your work. "
        "Keep going; it is being noticed.",
        "Rest is part of the plan today, not a break from it. "
        "Schedule it like anything else that matters.",
    ),
    "Aquarius": (
        "Uranus sparks an idea that does not fit the usual mold. "
        "Keep it; it fits the future.",
        "Your independence is an asset today. "
        "Go your own way and explain later if anyone asks.",
        "A group or community benefits from your perspective. "
        "Offer it even if it is unconventional.",
        "Technology or a new system makes something easier. "
        "Try the experiment.",
        "Friendship matters more than usual today. "
        "Reach out to someone who thinks differently from you.",
        "Detachment helps you see the pattern. "
        "Step back before you step in.",
    ),
    "Pisces": (
        "Neptune softens the edges of the day. "
        "Let intuition lead and logic follow.",
        "Your empathy is a gift today, as long as you keep your own shore in sight. "
        "Help without dissolving.",
        "Creative work flows easily. "
        "Music, images, or words come through if you make room for them.",
        "Dreams and daydreams carry useful signals. "
        "Jot down what stays with you.",
        "Kindness you offer quietly today ripples further than you will see. "
        "Offer it anyway.",
        "A little solitude restores you. "
        "Take it before the day asks more of you.",
    ),
})

DO_TEMPLATES: tuple[str, ...] = (
    "Follow the impulse that makes your heart beat faster",
    "Send a message to someone you have been thinking about",
    "Start the creative project you keep postponing",
    "Take a real break for self-care",
    "Write down three things you are grateful for",
    "Speak your truth with warmth and conviction",
    "Trust what your body says it needs",
    "Make something beautiful, even if no one sees it",
    "Set a boundary that protects your peace",
    "Take the scenic route and notice the details",
    "Make the decision you have been postponing",
    "Offer genuine praise to someone who earned it",
    "Return to a practice that nourishes you",
    "Share your plan with someone who believes in you",
    "Move your body in a way that feels good",
    "Spend a few minutes outside",
    "Put energy into your most important relationship",
    "Begin without waiting for perfect conditions",
    "Choose depth over breadth in conversation",
    "Cook something nourishing",
    "Read something that widens your perspective",
    "Celebrate a small win",
    "Ask for help when you need it",
    "Protect your morning hours",
)

DONT_TEMPLATES: tuple[str, ...] = (
    "Don't rush what needs time",
    "Don't dim your light to make others comfortable",
    "Don't make permanent decisions from temporary moods",
    "Don't compare your progress to someone else's",
    "Don't overexplain; a clear no is enough",
    "Don't ignore the fatigue asking for rest",
    "Don't people-please at your own expense",
    "Don't start difficult conversations by text",
    "Don't let perfectionism stall your momentum",
    "Don't replay yesterday's mistakes",
    "Don't overschedule your evening",
    "Don't brush off a compliment",
    "Don't fix what isn't broken",
    "Don't spread gossip",
    "Don't multitask through meaningful conversations",
    "Don't make money decisions from anxiety",
    "Don't give advice when someone only needs to be heard",
    "Don't abandon plans at the first obstacle",
    "Don't let the urgent crowd out the important",
    "Don't check your phone first thing after waking",
    "Don't say yes out of obligation",
    "Don't minimize your accomplishments",
    "Don't confuse busy with productive",
    "Don't force closure on a story still unfolding",
)

TRANSIT_TEMPLATES: tuple[TransitTemplate, ...] = (
    TransitTemplate("Moon in Aries", "☽", (
        "Emotional courage rises — act on what you feel",
        "Quick feelings, quick decisions; honor the urgency",
        "Your emotions burn bright and clear today",
    )),
    TransitTemplate("Moon in Pisces", "☽", (
        "Intuition runs deep — trust your inner tides",
        "Dreamy currents heighten creativity and empathy",
        "Feelings open onto something larger than you",
    )),
    TransitTemplate("Venus trine Jupiter", "♀", (
        "Warmth arrives from unexpected quarters",
        "Generosity flows through relationships and creative work",
        "Grace amplifies beauty in every connection",
    )),
    TransitTemplate("Mercury in Aquarius", "☿", (
        "Thoughts turn electric — capture the brilliant ones",
        "Communication becomes inventive and unconventional",
        "Insights arrive ahead of their time",
    )),
    TransitTemplate("Mars sextile Neptune", "♂", (
        "Inspired action flows — follow the creative current",
        "Drive meets vision in a productive way",
        "Your effort feels purposeful today",
    )),
    TransitTemplate("Sun conjunct Pluto", "☉", (
        "Personal power intensifies — use it to transform",
        "Something hidden comes to light and changes the picture",
        "A deep reset of priorities is underway",
    )),
    TransitTemplate("Jupiter in Taurus", "♃", (
        "Slow, steady growth in resources and comfort",
        "Abundance comes through patience and quality",
        "Investments of time and care pay off",
    )),
    TransitTemplate("Saturn trine Moon", "♄", (
        "Emotional steadiness makes hard things easier",
        "Commitments feel supportive rather than heavy",
        "Maturity and tenderness work together today",
    )),
    TransitTemplate("Venus in Capricorn", "♀", (
        "Love shows up as reliability and effort",
        "Lasting value matters more than flash",
        "Quiet loyalty is the romantic gesture today",
    )),
    TransitTemplate("Mercury square Mars", "☿", (
        "Words come out sharp — pause before replying",
        "Debates heat up; aim for clarity, not victory",
        "Mental energy is high; channel it into focused work",
    )),
    TransitTemplate("Uranus trine Sun", "♅", (
        "A welcome surprise breaks the routine",
        "Freedom to try something new feels natural",
        "Originality is rewarded today",
    )),
    TransitTemplate("Moon conjunct Venus", "☽", (
        "Affection and comfort come easily",
        "A good day for beauty, art, and pleasure",
        "Relationships feel soft and receptive",
    )),
    TransitTemplate("Sun trine Jupiter", "☉", (
        "Confidence and luck travel together today",
        "Big-picture thinking opens real opportunities",
        "Optimism is well placed right now",
    )),
    TransitTemplate("Venus square Saturn", "♀", (
        "Affection meets a reality check — be patient",
        "Commitments ask for clarity about what you value",
        "Love grows stronger through honest limits",
    )),
)

LUCKY_COLORS: tuple[str, ...] = (
    "Celestial Gold",
    "Rose Quartz Pink",
    "Midnight Sapphire",
    "Amber Honey",
    "Moonstone Silver",
    "Deep Amethyst",
    "Emerald Forest",
    "Copper Sunset",
    "Pearl White",
    "Obsidian Black",
    "Indigo Twilight",
    "Crimson Velvet",
    "Sage Mist",
    "Lavender Haze",
    "Teal Ocean",
    "Golden Saffron",
)

LUCKY_TIMES: tuple[str, ...] = (
    "6:11 AM — the hour of intention",
    "7:33 AM — when the morning star peaks",
    "8:08 AM — a window of alignment",
    "9:22 AM — Mercury's hour of clarity",
    "10:10 AM — the mirror hour",
    "11:11 AM — a quiet signal",
    "12:12 PM — the solar zenith",
    "1:44 PM — an afternoon wave of inspiration",
    "3:33 PM — the hour of creation",
    "4:44 PM — a window for grounding",
    "5:55 PM — the twilight turn",
    "6:30 PM — Venus hour of connection",
    "8:18 PM — the lunar hour of intuition",
    "9:09 PM — Neptune's dreamtime",
    "10:10 PM — the hour of reflection",
)
