"""MysticCastle world definition: rooms, items, aliases, and the dragon's dialogue."""

ROOMS = {
    "entrance": {
        "name": "Castle Entrance",
        "description": (
            "You stand before the massive iron gates of MysticCastle. The ancient "
            "stonework looms above, weathered by centuries. Gargoyles with hollow "
            "eyes peer down from their perches. The gates hang open, creaking in "
            "the cold breeze. A faded inscription reads: 'Those who seek the Crown "
            "must prove their worth.'"
        ),
        "exits": {"north": "courtyard"},
        "items": [],
    },
    "courtyard": {
        "name": "Overgrown Courtyard",
        "description": (
            "A once-grand courtyard now reclaimed by nature. Dead vines crawl up "
            "crumbling statues of forgotten knights. A dry fountain stands in the "
            "center, filled with dead leaves. The main keep rises to the north, "
            "while archways lead east and west."
        ),
        "exits": {
            "south": "entrance",
            "north": "greathall",
            "east": "chapel",
            "west": "stables",
        },
        "items": ["rusty key"],
    },
    "greathall": {
        "name": "The Great Hall",
        "description": (
            "Tattered banners hang from the vaulted ceiling. A massive oak table "
            "stretches the length of the hall, still set with tarnished silver. "
            "Moonlight streams through shattered windows. A grand staircase leads "
            "upward, and a door east leads to the kitchen."
        ),
        "exits": {"south": "courtyard", "up": "gallery", "east": "kitchen"},
        "items": ["silver goblet"],
    },
    "chapel": {
        "name": "Abandoned Chapel",
        "description": (
            "Rows of dusty pews face a stone altar draped in moth-eaten cloth. "
            "Stained glass windows cast eerie colored light. The air smells of old "
            "incense and secrets. A confessional booth stands in the corner, its "
            "door slightly ajar."
        ),
        "exits": {"west": "courtyard"},
        "items": ["holy symbol"],
    },
    "stables": {
        "name": "Ruined Stables",
        "description": (
            "Empty stalls line the walls, still bearing nameplates for horses long "
            "dead. Rotting hay carpets the floor. Something scratched deep gouges "
            "into the wooden walls, from the inside. A trapdoor leads down into "
            "darkness."
        ),
        "exits": {"east": "courtyard", "down": "cellar"},
        "items": [],
    },
    "cellar": {
        "name": "Wine Cellar",
        "dark": True,
        "description": (
            "Complete darkness surrounds you. The air is cold and damp, thick with "
            "mold and old wine. You hear water dripping somewhere in the blackness."
        ),
        "description_lit": (
            "Your lamp reveals rows of wine racks, most bottles shattered. Cobwebs "
            "hang like curtains. Against the far wall, you notice a loose stone that "
            "doesn't quite match the others. In the back corner, a crumbling archway "
            "leads to descending stairs. Warm air rises from below, carrying the "
            "scent of sulfur."
        ),
        "exits": {"up": "stables", "down": "dungeonstairs"},
        "items": ["ancient wine"],
        "secrets": {
            "loose stone": {
                "description": (
                    "Behind the loose stone, you find a hidden compartment "
                    "containing a gleaming crystal key!"
                ),
                "gives": "crystal key",
                "one_time": True,
            },
        },
    },
    "kitchen": {
        "name": "Castle Kitchen",
        "description": (
            "A cavernous kitchen with massive cold fireplaces. Copper pots hang "
            "from hooks, green with age. Strangely, a single candle burns on the "
            "center table, its flame steady despite no wind."
        ),
        "exits": {"west": "greathall"},
        "items": ["brass lamp"],
    },
    "gallery": {
        "name": "Portrait Gallery",
        "description": (
            "A long hallway lined with portraits of former lords and ladies. Their "
            "painted eyes seem to follow you. Many faces have been scratched out. "
            "The last portrait shows a king holding a golden crown, but the crown "
            "has been cut from the canvas."
        ),
        "exits": {"down": "greathall", "north": "library", "east": "bedroom"},
        "items": [],
    },
    "library": {
        "name": "The Grand Library",
        "description": (
            "Towering bookshelves reach to a domed ceiling painted with "
            "constellations. Most books have crumbled to dust. A reading desk holds "
            "an open book with strange symbols. A spiral staircase leads up to the "
            "tower."
        ),
        "exits": {"south": "gallery", "up": "tower"},
        "items": ["spell book"],
    },
    "bedroom": {
        "name": "Lord's Bedchamber",
        "description": (
            "A four-poster bed dominates the room, its curtains dusty. A vanity "
            "mirror reflects nothing, just empty darkness where your reflection "
            "should be. An ornate wardrobe stands against the wall. Looking closer "
            "at the wardrobe, you notice it has a false back..."
        ),
        "exits": {"west": "gallery"},
        "items": [],
        "locked": True,
        "locked_message": "The bedroom door is locked with an ornate crystal lock.",
        "key_required": "crystal key",
        "secrets": {
            "wardrobe": {
                "description": (
                    "You push aside the false back of the wardrobe and discover a "
                    "hidden passage leading to a secret vault!"
                ),
                "opens_room": "vault",
                "one_time": True,
            },
        },
    },
    "tower": {
        "name": "Wizard's Tower",
        "description": (
            "The castle's highest tower. Arcane instruments and star charts cover "
            "every surface. In the center, on a pedestal of black marble, rests THE "
            "CROWN OF WHISPERS, glowing with inner light."
        ),
        "exits": {"down": "library"},
        "items": ["crown of whispers"],
        "locked": True,
        "locked_message": (
            "A magical barrier blocks your way. Strange runes pulse with purple "
            "light. Perhaps a spell book could help..."
        ),
        "key_required": "spell book",
    },
    "vault": {
        "name": "The Secret Vault",
        "description": (
            "You've discovered the castle's hidden treasure vault! Gold coins "
            "glitter in the corners, jeweled weapons hang on walls. But the true "
            "treasure is the journey that brought you here."
        ),
        "exits": {"out": "bedroom"},
        "items": [],
        "is_victory": True,
    },
    "dungeonstairs": {
        "name": "Descending Stairs",
        "description": (
            "A narrow spiral staircase carved from black stone winds down into the "
            "earth. The air grows warmer with each step. Scorch marks line the "
            "walls, and the smell of sulfur grows stronger. Ancient dwarven runes "
            "warn: 'TURN BACK - HERE SLEEPS FIRE.'"
        ),
        "exits": {"up": "cellar", "down": "lair"},
        "items": [],
    },
    "lair": {
        "name": "The Dragon's Lair",
        "description": (
            "An enormous cavern glitters with gold and jewels piled into mountains. "
            "Atop the largest hoard lies VERMITHRAX, an ancient red dragon. One "
            "golden eye cracks open, watching you. Smoke curls from his nostrils. "
            "'A thief?' his voice rumbles like thunder. 'Or... a guest? It has been "
            "so long since I had company.'"
        ),
        "exits": {"up": "dungeonstairs"},
        "items": ["dragon scale", "golden chalice"],
        "has_dragon": True,
        "dragon_state": "awake",
    },
}

ITEMS = {
    "rusty key": {
        "description": "An old iron key, orange with rust but still functional. It might open something simple.",
        "takeable": True,
    },
    "silver goblet": {
        "description": "A tarnished silver goblet engraved with the castle's coat of arms.",
        "takeable": True,
    },
    "holy symbol": {
        "description": "A small golden medallion bearing a sacred symbol. It feels warm to the touch.",
        "takeable": True,
    },
    "brass lamp": {
        "description": "An old brass oil lamp. It still has fuel and could light dark places. Use it to light it.",
        "takeable": True,
        "is_light": True,
    },
    "ancient wine": {
        "description": "A dusty bottle of wine, hundreds of years old. The cork is still sealed.",
        "takeable": True,
    },
    "crystal key": {
        "description": "A key carved from pure crystal. It glows faintly with inner light.",
        "takeable": True,
    },
    "spell book": {
        "description": "A leather-bound tome of arcane knowledge. The pages shimmer with magical energy.",
        "takeable": True,
    },
    "crown of whispers": {
        "description": "The legendary Crown of Whispers. Ancient voices murmur from within its golden band.",
        "takeable": True,
        "is_goal": True,
    },
    "dragon scale": {
        "description": (
            "A palm-sized scale shed by Vermithrax. It shimmers crimson and gold, "
            "warm to the touch. A gift from the dragon himself."
        ),
        "takeable": True,
    },
    "golden chalice": {
        "description": (
            "A jewel-encrusted chalice from the dragon's hoard. Vermithrax allowed "
            "you to take it - a sign of respect."
        ),
        "takeable": True,
    },
    "dragon tooth": {
        "description": (
            "An ancient dragon tooth, given as a token of friendship by Vermithrax. "
            "It pulses with inner fire."
        ),
        "takeable": True,
    },
}

START_ROOM = "entrance"

DIRECTIONS = ("north", "south", "east", "west", "up", "down", "out")

# Verb and direction shortcuts. Targets that are directions turn into "go".
ALIASES = {
    "n": "north", "s": "south", "e": "east", "w": "west", "u": "up", "d": "down",
    "get": "take", "grab": "take", "pick": "take",
    "l": "look", "examine": "look", "x": "look", "inspect": "look", "search": "look",
    "i": "inventory", "inv": "inventory",
    "light": "use", "activate": "use", "open": "use",
    "speak": "talk", "say": "talk", "chat": "talk", "greet": "talk",
    "give": "offer", "present": "offer", "share": "offer",
}

KNOWN_VERBS = (
    "go", "look", "take", "drop", "inventory", "use", "read",
    "talk", "offer", "help", "save", "load",
)

DRAGON_DIALOGUES = (
    "'You do not flee,' the dragon muses, smoke curling from his jaws. "
    "'Interesting. Most mortals run screaming. I am Vermithrax, last of the fire "
    "drakes. Tell me, little one, what brings you to my lair?'",
    "'The Crown of Whispers?' Vermithrax chuckles, a sound like grinding "
    "boulders. 'That trinket upstairs? I've watched a hundred fools die seeking "
    "it. You're different. You stopped to speak with a dragon instead of stealing "
    "from him.'",
    "'I have slept beneath this castle for a thousand years,' the dragon sighs, "
    "'guarding treasures that no longer matter. Company is worth more than gold "
    "now. Take something from my hoard - a token of... friendship. Just promise "
    "you'll return to tell me tales of the world above.'",
    "'Go on then, take what catches your eye. The scale, the chalice - or if "
    "you've truly earned my respect, ask for a tooth. That is a gift I give only "
    "to those I consider equals.'",
    "Vermithrax settles back onto his gold pile, one eye still watching you "
    "warmly. 'Visit again, little friend. An old dragon appreciates good company.'",
)

# Dialogue index at which the dragon warms to the player
FRIENDLY_DIALOGUE_INDEX = 2

DRAGON_GIFT = "dragon tooth"
