"""Default subjects, quotes and Old English passages."""

from __future__ import annotations

from dataclasses import dataclass

from vow_timer.repositories import PoemRepository, QuoteRepository, SubjectRepository

_PROGRAMMING = ["GoLang", "React"]

DEFAULT_SUBJECTS: list[tuple[str, str]] = [
    ("GoLang", "🔷"),
    ("React", "⚛"),
    ("Music", "🎵"),
    ("Reading", "📖"),
    ("Writing", "✍"),
]

# (text, source, subjects); no subjects means the quote is shown for all of them
DEFAULT_QUOTES: list[tuple[str, str, list[str]]] = [
    (
        "Some of the greatest innovations have come from people who only "
        "succeeded because they were too dumb to know that what they were "
        "doing was impossible.",
        "",
        [],
    ),
    ("Game design is decision making, and decisions must be made with confidence.", "", []),
    ("A computer is a creative amplifier.", "", []),
    ("First, solve the problem. Then, write the code.", "John Johnson", _PROGRAMMING),
    ("Code is like humor. When you have to explain it, it's bad.", "Cory House", _PROGRAMMING),
    ("Simplicity is the soul of efficiency.", "Austin Freeman", _PROGRAMMING),
    ("Make it work, make it right, make it fast.", "Kent Beck", _PROGRAMMING),
    ("The best error message is the one that never shows up.", "Thomas Fuchs", _PROGRAMMING),
    ("Music is the shorthand of emotion.", "Leo Tolstoy", ["Music"]),
    ("Without music, life would be a mistake.", "Friedrich Nietzsche", ["Music"]),
    ("Music expresses that which cannot be put into words.", "Victor Hugo", ["Music"]),
    (
        "If you aren't dropping, you aren't learning. And if you aren't "
        "learning, you aren't a juggler.",
        "Juggler's proverb",
        ["Music"],
    ),
    ("The only way to do great work is to love what you do.", "Steve Jobs", ["Music"]),
    (
        "A reader lives a thousand lives before he dies. The man who never "
        "reads lives only one.",
        "George R.R. Martin",
        ["Reading"],
    ),
    ("Reading is to the mind what exercise is to the body.", "Joseph Addison", ["Reading"]),
    (
        "There is nothing to writing. All you do is sit down at a typewriter and bleed.",
        "Ernest Hemingway",
        ["Writing"],
    ),
    (
        "Start writing, no matter what. The water does not flow until the "
        "faucet is turned on.",
        "Louis L'Amour",
        ["Writing"],
    ),
]

# (old_english, modern_english, source, line_ref)
DEFAULT_POEMS: list[tuple[str, str, str, str]] = [
    (
        "Oft him ánhaga áre gebídeð,\nmetudes miltse, þéah þe hé módcearig",
        "Often the solitary one finds grace,\nthe Measurer's mercy, though he, anxious in heart",
        "The Wanderer",
        "lines 1-2",
    ),
    (
        "Swá cwæð eardstapa, earfeþa gemyndig,\nwraþra wælsleahta, wine-mǽga hryre",
        "So spoke the earth-stepper, mindful of hardships,\nof cruel slaughters, the fall of kinsmen",
        "The Wanderer",
        "lines 6-7",
    ),
    (
        "Hwǽr cwóm mearg? Hwǽr cwóm mago?\nHwǽr cwóm máþþumgyfa?",
        "Where has the horse gone? Where has the man gone?\nWhere has the treasure-giver gone?",
        "The Wanderer",
        "lines 92-93",
    ),
    (
        "Hwǽr cwóm symbla gesetu?\nHwǽr sindon seledréamas?",
        "Where have the seats of feasting gone?\nWhere are the joys of the hall?",
        "The Wanderer",
        "lines 93-94",
    ),
    (
        "Éalá beorht bune! Éalá byrnwiga!\nÉalá þéodnes þrym!",
        "Alas, the bright cup! Alas, the mailed warrior!\nAlas, the glory of the prince!",
        "The Wanderer",
        "lines 94-95",
    ),
    (
        "Til biþ se þe his tréowe gehealdeþ,\nne sceal nǽfre his torn tó rycene",
        "Good is he who keeps his faith,\nnor shall he ever too quickly show his grief",
        "The Wanderer",
        "lines 112-113",
    ),
    (
        "Hwæt! Wé Gár-Dena in géar-dagum,\nþéod-cyninga þrym gefrúnon",
        "Listen! We have heard of the glory\nof the Spear-Danes in days of old",
        "Beowulf",
        "lines 1-2",
    ),
    (
        "Swá sceal geong guma góde gewyrcean,\nfromum feohgiftum on fæder bearme",
        "So should a young man do good deeds,\nwith rich gifts in his father's keeping",
        "Beowulf",
        "lines 20-21",
    ),
    (
        "Ic þæt þonne forhicge,\nswá mé Higelác síe, mín mondrihten,\nmódes blíðe",
        "I scorn therefore to carry sword or shield,\nif Hygelac, my liege lord,\nbe glad of heart",
        "Beowulf",
        "lines 435-437",
    ),
    (
        "Wyrd oft nereð\nunfǽgne eorl, þonne his ellen déah",
        "Fate often saves\nan undoomed man, when his courage holds",
        "Beowulf",
        "lines 572-573",
    ),
    (
        "Ure ǽghwylc sceal ende gebídan\nworolde lífes; wyrce sé þe móte\ndómes ǽr déaþe",
        "Each of us must await the end\nof worldly life; let him who may\nwin glory before death",
        "Beowulf",
        "lines 1386-1388",
    ),
    (
        "Sé þe his worde wéaldeð, wita manna gehwylc,\nwís on gewitte",
        "He who rules his words, every wise man,\nskilled in thought",
        "Beowulf",
        "lines 1705-1706",
    ),
    (
        "Né bið swylc cwénlíc þéaw\nidese tó efnanne, þéah ðe híe ǽnlíc sý",
        "It is not queenly custom\nfor a woman to practice, though she be peerless",
        "Beowulf",
        "lines 1940-1941",
    ),
    (
        "Nealles him on héape handgesteallan,\næðelinga bearn, ymbe gestódon\nhildecystum",
        "Not at all did the band of comrades,\nsons of nobles, stand about him\nwith battle valor",
        "Beowulf",
        "lines 2596-2598",
    ),
]


@dataclass
class SeedReport:
    """Rows created by one seeding run (existing rows are skipped)."""

    subjects: int = 0
    quotes: int = 0
    poems: int = 0

    @property
    def total(self) -> int:
        return self.subjects + self.quotes + self.poems


def seed_defaults(
    subjects: SubjectRepository,
    quotes: QuoteRepository,
    poems: PoemRepository,
) -> SeedReport:
    """Insert the default content. Safe to run repeatedly."""
    report = SeedReport()

    for name, icon in DEFAULT_SUBJECTS:
        _, created = subjects.add_if_missing(name, icon)
        report.subjects += created

    for text, source, quote_subjects in DEFAULT_QUOTES:
        _, created = quotes.add_if_missing(text, source, quote_subjects)
        report.quotes += created

    for old_english, modern_english, source, line_ref in DEFAULT_POEMS:
        _, created = poems.add_if_missing(old_english, modern_english, source, line_ref)
        report.poems += created

    return report
