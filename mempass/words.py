"""
Bundled English word list, used when no other dictionary is given.

Common, easily typed words of four to eight letters, grouped by length.
"""

WORDS = (
    # four letters
    "able", "acid", "acre", "aged", "aide", "arch", "area", "army", "aunt", "away",
    "axle", "baby", "back", "bake", "ball", "band", "bank", "barn", "base", "bath",
    "bead", "beam", "bean", "bear", "beef", "bell", "belt", "bike", "bird", "blue",
    "blur", "boat", "body", "bold", "bolt", "bone", "book", "boot", "bowl", "bulb",
    "bulk", "busy", "cage", "cake", "calf", "calm", "camp", "card", "care", "cart",
    "cave", "chef", "chin", "chip", "city", "clap", "clay", "clip", "club", "clue",
    "coal", "coat", "code", "coin", "cold", "cook", "cool", "cope", "copy", "cord",
    "corn", "crab", "crew", "crop", "cube", "damp", "dark", "dash", "dawn", "deck",
    "deer", "deny", "desk", "dial", "diet", "dime", "dirt", "dish", "dock", "door",
    "dove", "drip", "drop", "drum", "duck", "dune", "dust", "duty", "earn", "east",
    "easy", "echo", "edge", "edit", "else", "evil", "exit", "fact", "fade", "farm",
    "feed", "feel", "fern", "film", "fire", "fish", "flag", "flat", "flip", "foam",
    "fold", "food", "foot", "fork", "frog", "fuel", "fury", "gate", "gaze", "gear",
    "gift", "glow", "glue", "goat", "gold", "golf", "gown", "grid", "grit", "grow",
    "hail", "half", "hand", "harp", "hawk", "head", "heat", "herb", "high", "hill",
    "hint", "home", "hood", "hook", "hope", "horn", "host", "huge", "hunt", "hurt",
    "icon", "idea", "idle", "inch", "into", "iris", "iron", "item", "jade", "jazz",
    "joke", "jump", "junk", "just", "keen", "kick", "kind", "kiss", "kite", "kiwi",
    "knee", "knot", "know", "lady", "lake", "lamp", "lane", "lava", "lazy", "leaf",
    "lens", "life", "lift", "limb", "lime", "link", "lion", "list", "live", "loaf",
    "loan", "lock", "long", "loop", "loud", "maid", "mail", "main", "make", "mask",
    "math", "maze", "meat", "menu", "mesh", "mild", "milk", "mind", "mint", "miss",
    "moon", "more", "moss", "move", "much", "mule", "must", "myth", "name", "near",
    "neck", "nest", "news", "next", "nice", "nose", "note", "obey", "odor", "okay",
    "once", "only", "open", "oval", "oven", "page", "palm", "park", "path", "pave",
    "pear", "pine", "pink", "pipe", "play", "plug", "poem", "poet", "pole", "pond",
    "pony", "post", "pull", "push", "quit", "quiz", "race", "rack", "rain", "ramp",
    "rare", "rate", "real", "reef", "rely", "rent", "rice", "rich", "ride", "ring",
    "risk", "road", "rock", "roof", "room", "rose", "ruby", "rude", "rule", "safe",
    "sail", "salt", "same", "sand", "save", "scan", "seat", "seed", "sell", "shed",
    "ship", "shoe", "shop", "sign", "silk", "sing", "size", "skin", "slab", "slam",
    "slim", "slot", "slow", "snap", "snow", "soap", "sock", "soda", "soft", "song",
    "soon", "sort", "soul", "soup", "spin", "spot", "star", "stay", "stem", "step",
    "such", "suit", "sure", "swan", "swap", "swim", "tail", "talk", "tank", "tape",
    "task", "taxi", "team", "tell", "tent", "term", "test", "text", "that", "then",
    "they", "this", "tide", "tilt", "time", "tiny", "tone", "tool", "town", "trap",
    "tray", "tree", "trim", "trip", "true", "tuba", "tube", "tuna", "turn", "twin",
    "type", "undo", "unit", "upon", "urge", "vase", "vast", "verb", "very", "view",
    "vine", "visa", "void", "vote", "wage", "wait", "walk", "wall", "want", "warm",
    "wash", "wasp", "wave", "wear", "west", "whip", "wide", "wife", "wild", "will",
    "wind", "wine", "wing", "wink", "wire", "wise", "wish", "wolf", "wood", "wool",
    "word", "work", "wrap", "yard", "yarn", "year", "zero", "zinc", "zone",
    # five letters
    "about", "above", "acorn", "actor", "adapt", "admit", "adobe", "adopt", "adult", "after",
    "again", "agent", "agree", "ahead", "aisle", "alarm", "album", "alert", "algae", "alien",
    "align", "alike", "alive", "alley", "allow", "alone", "along", "aloud", "alter", "amaze",
    "amber", "amend", "ample", "amuse", "anger", "angle", "angry", "ankle", "anvil", "apart",
    "apple", "apply", "april", "apron", "arena", "argue", "arise", "armor", "arrow", "aside",
    "atlas", "attic", "audio", "avoid", "awake", "award", "aware", "awful", "bacon", "badge",
    "bagel", "baker", "banjo", "basil", "basin", "batch", "beach", "beard", "beast", "begin",
    "being", "below", "bench", "berry", "birch", "bison", "blade", "blame", "blank", "blast",
    "blaze", "blend", "bless", "blind", "blink", "bliss", "block", "blond", "blood", "bloom",
    "blunt", "blush", "board", "bonus", "boxer", "brain", "brand", "brass", "brave", "bread",
    "breed", "brief", "bring", "brisk", "broad", "brook", "broom", "brown", "brush", "build",
    "buyer", "cabin", "cable", "cadet", "camel", "canal", "candy", "canoe", "cargo", "carry",
    "carve", "catch", "cause", "cedar", "chain", "chair", "chalk", "chaos", "charm", "chart",
    "chase", "cheap", "check", "cheek", "chess", "chief", "child", "chill", "chunk", "churn",
    "cider", "civic", "civil", "claim", "clash", "class", "clean", "clerk", "click", "cliff",
    "climb", "cloak", "clock", "cloth", "cloud", "clown", "coach", "coast", "comic", "coral",
    "couch", "cough", "count", "cover", "crack", "craft", "cramp", "crane", "crash", "crawl",
    "crazy", "cream", "creek", "crisp", "crown", "cruel", "crush", "curve", "cycle", "daisy",
    "dance", "delay", "delta", "depth", "diary", "disco", "donor", "dozen", "draft", "drama",
    "dream", "drift", "drill", "drink", "drive", "dutch", "dwarf", "eager", "eagle", "early",
    "earth", "eight", "elbow", "elder", "elite", "ember", "empty", "enact", "enemy", "enjoy",
    "enter", "entry", "equal", "equip", "erase", "erode", "error", "erupt", "essay", "evoke",
    "exact", "exile", "exist", "extra", "fable", "faint", "fairy", "faith", "false", "fancy",
    "fault", "feast", "fence", "fever", "fiber", "field", "final", "flame", "flash", "float",
    "flock", "floor", "fluid", "flush", "flute", "focus", "forge", "found", "frame", "fresh",
    "frost", "frown", "fruit", "gauge", "genre", "ghost", "giant", "glare", "glass", "gleam",
    "glide", "globe", "glory", "glove", "grain", "grape", "grass", "great", "green", "grief",
    "group", "grunt", "guard", "guess", "guest", "guide", "guilt", "habit", "happy", "harsh",
    "heart", "hedge", "hello", "hobby", "honey", "horse", "hotel", "house", "hover", "human",
    "humor", "hurry", "igloo", "image", "index", "inner", "input", "issue", "ivory", "jeans",
    "jelly", "jewel", "jolly", "judge", "juice", "kayak", "knife", "knock", "koala", "label",
    "large", "later", "latin", "laugh", "layer", "learn", "leave", "legal", "lemon", "level",
    "lever", "light", "lilac", "limit", "llama", "lobby", "local", "lodge", "logic", "loyal",
    "lucky", "lunar", "lunch", "magic", "major", "mango", "maple", "marsh", "match", "medal",
    "melon", "mercy", "merge", "merit", "merry", "metal", "mimic", "minor", "mixer", "model",
    "month", "moral", "motor", "mouse", "movie", "music", "naive", "nerve", "never", "night",
    "noble", "north", "novel", "nurse", "occur", "ocean", "offer", "often", "olive", "opera",
    "orbit", "other", "otter", "outer", "owner", "paint", "panda", "paper", "peach", "pearl",
    "photo", "piano", "piece", "pilot", "pitch", "pixel", "pizza", "place", "plate", "plaza",
    "pluck", "plume", "point", "polar", "power", "price", "pride", "print", "prize", "proof",
    "proud", "pulse", "punch", "pupil", "puppy", "purse", "quail", "quick", "quilt", "quote",
    "radar", "radio", "raise", "rally", "ranch", "range", "rapid", "raven", "razor", "ready",
    "rebel", "relax", "renew", "ridge", "right", "rigid", "rival", "river", "roast", "robin",
    "robot", "rough", "round", "route", "royal", "rural", "salad", "salon", "sauce", "scale",
    "scare", "scarf", "scene", "scout", "scrap", "scrub", "sense", "setup", "seven", "shaft",
    "share", "shelf", "shell", "shift", "shine", "shock", "shoot", "short", "shove", "shrug",
    "siege", "sight", "silly", "since", "siren", "skate", "skill", "skirt", "skull", "slate",
    "sleep", "slice", "slide", "slush", "small", "smart", "smile", "snack", "snake", "sniff",
    "solar", "solid", "sorry", "sound", "south", "space", "spare", "spawn", "speak", "speed",
    "spell", "spend", "spice", "spike", "split", "spoil", "spoon", "sport", "spray", "staff",
    "stage", "stamp", "stand", "start", "state", "steak", "steel", "stick", "still", "sting",
    "stock", "stone", "stool", "storm", "story", "stove", "stuff", "style", "sugar", "sunny",
    "super", "surge", "swamp", "swarm", "swear", "sweet", "swift", "swing", "sword", "syrup",
    "table", "taste", "teach", "thank", "theme", "there", "thing", "three", "throw", "thumb",
    "tiger", "tired", "title", "toast", "today", "token", "tooth", "topic", "torch", "total",
    "tower", "track", "trade", "train", "trash", "trend", "trial", "tribe", "trick", "truck",
    "truly", "trust", "truth", "tulip", "twice", "twist", "uncle", "under", "until", "upper",
    "upset", "urban", "usage", "usual", "vague", "valid", "valve", "vapor", "vault", "venue",
    "video", "viola", "virus", "visit", "vital", "vivid", "vocal", "voice", "wagon", "waste",
    "water", "weird", "whale", "wheat", "wheel", "width", "woman", "world", "worry", "worth",
    "wreck", "wrist", "write", "wrong", "youth", "zebra",
    # six letters
    "absent", "absorb", "accent", "accept", "access", "accuse", "across", "acting", "action", "active",
    "actual", "addict", "adjust", "admire", "advice", "advise", "affair", "afford", "afraid", "agency",
    "agenda", "almond", "almost", "always", "ambush", "amount", "anchor", "animal", "annual", "answer",
    "antler", "anyone", "appeal", "appear", "arcade", "arctic", "around", "arrest", "arrive", "artist",
    "ascend", "ashore", "asleep", "aspect", "assert", "assist", "assume", "assure", "asthma", "attach",
    "attack", "attend", "august", "author", "autumn", "avenue", "badger", "bakery", "bamboo", "banana",
    "bandit", "banker", "banner", "barber", "barley", "barrel", "basket", "battle", "bazaar", "beacon",
    "beaker", "beauty", "become", "before", "behave", "behind", "belief", "belong", "beside", "betray",
    "better", "beyond", "bicker", "binder", "bishop", "bitter", "bleach", "blouse", "bonnet", "border",
    "borrow", "bottle", "bottom", "bounce", "branch", "breath", "breeze", "bridge", "bright", "broken",
    "bronze", "bucket", "budget", "buffet", "bundle", "bunker", "burden", "burger", "burrow", "butter",
    "button", "cactus", "camera", "camper", "cancel", "candle", "canvas", "canyon", "carbon", "career",
    "carpet", "carrot", "casino", "castle", "casual", "cattle", "caught", "celery", "cement", "census",
    "cereal", "chalet", "chance", "change", "chapel", "charge", "cheese", "cherry", "cherub", "chorus",
    "cinema", "circle", "clause", "clever", "client", "clinic", "closet", "clover", "clutch", "cobalt",
    "coffee", "collar", "colony", "colour", "column", "comedy", "common", "cookie", "copper", "corner",
    "cotton", "couple", "course", "cousin", "coyote", "cradle", "crater", "credit", "critic", "crouch",
    "cruise", "crunch", "cuckoo", "custom", "damage", "danger", "daring", "debate", "debris", "decade",
    "decide", "define", "degree", "demand", "denial", "depart", "depend", "deputy", "derive", "desert",
    "design", "detail", "detect", "device", "devote", "diesel", "differ", "dinner", "direct", "divert",
    "divide", "doctor", "domain", "donate", "donkey", "double", "dragon", "drawer", "during", "easily",
    "effort", "either", "embark", "embody", "emerge", "employ", "enable", "energy", "engage", "engine",
    "enlist", "enough", "enrich", "enroll", "ensure", "entire", "escape", "estate", "evolve", "excess",
    "excite", "excuse", "exotic", "expand", "expect", "expire", "expose", "extend", "fabric", "falcon",
    "family", "famous", "father", "female", "fiddle", "figure", "filter", "finger", "finish", "fiscal",
    "flavor", "flight", "flower", "follow", "forest", "fossil", "foster", "friend", "fringe", "frozen",
    "future", "gadget", "galaxy", "gallop", "gamble", "garage", "garden", "garlic", "gather", "genius",
    "gentle", "giggle", "ginger", "glance", "gospel", "gossip", "govern", "guitar", "hammer", "handle",
    "harbor", "hazard", "health", "helmet", "hidden", "hockey", "hollow", "honest", "humble", "hungry",
    "hurdle", "hybrid", "ignore", "immune", "impact", "impose", "income", "indoor", "infant", "inform",
    "inhale", "inject", "injury", "insect", "inside", "intact", "invest", "invite", "island", "jacket",
    "jaguar", "jersey", "jigsaw", "jumble", "jungle", "junior", "kernel", "kettle", "kidney", "kitten",
    "ladder", "lagoon", "laptop", "leader", "legend", "length", "lesson", "letter", "likely", "liquid",
    "little", "lizard", "locket", "lonely", "lounge", "lumber", "luxury", "lyrics", "magnet", "mammal",
    "manage", "manual", "marble", "margin", "marine", "market", "master", "matrix", "matter", "meadow",
    "member", "memory", "method", "middle", "minute", "mirror", "misery", "mobile", "moment", "monkey",
    "motion", "muffin", "muscle", "museum", "mutual", "myself", "napkin", "narrow", "nation", "nature",
    "nectar", "needle", "nephew", "noodle", "normal", "notice", "number", "object", "oblige", "obtain",
    "office", "oppose", "option", "orange", "orient", "orphan", "output", "oxygen", "oyster", "paddle",
    "palace", "parrot", "peanut", "pebble", "pencil", "people", "pepper", "permit", "person", "phrase",
    "picnic", "pigeon", "pillow", "planet", "please", "pledge", "plunge", "pocket", "police", "potato",
    "powder", "praise", "prefer", "pretty", "profit", "public", "purity", "puzzle", "rabbit", "random",
    "rather", "reason", "recall", "recipe", "record", "reduce", "reform", "refuse", "region", "regret",
    "reject", "relief", "remain", "remind", "remove", "render", "reopen", "repair", "repeat", "report",
    "rescue", "resist", "result", "retire", "return", "reveal", "review", "reward", "rhythm", "ribbon",
    "ripple", "ritual", "rocket", "rookie", "rotate", "rubber", "runway", "saddle", "salmon", "salute",
    "sample", "sandal", "scheme", "school", "screen", "script", "search", "season", "second", "secret",
    "select", "senior", "series", "settle", "shadow", "shield", "shiver", "shrimp", "silent", "silver",
    "simple", "sister", "sketch", "slight", "slogan", "smooth", "soccer", "social", "source", "sphere",
    "spider", "spirit", "spread", "spring", "square", "stable", "stairs", "stereo", "street", "strike",
    "strong", "submit", "subway", "sudden", "suffer", "summer", "sunset", "supply", "survey", "switch",
    "symbol", "system", "tackle", "talent", "target", "tattoo", "temple", "tenant", "tennis", "theory",
    "thrive", "ticket", "timber", "tissue", "toilet", "tomato", "tongue", "topple", "toward", "tragic",
    "travel", "trophy", "tumble", "tunnel", "turkey", "turtle", "twelve", "twenty", "umpire", "unable",
    "unfair", "unfold", "unique", "unlock", "unveil", "update", "uphold", "useful", "vacant", "vacuum",
    "vanish", "velvet", "vendor", "verify", "viable", "violin", "visual", "volume", "voyage", "walnut",
    "wander", "wealth", "window", "winner", "winter", "wisdom", "wizard", "wonder", "yellow",
    # seven letters
    "academy", "account", "achieve", "acrobat", "address", "advance", "ageless", "already", "amazing", "applaud",
    "approve", "arrange", "arrival", "athlete", "attempt", "attract", "auction", "average", "avocado", "awesome",
    "awkward", "baggage", "balance", "balcony", "balloon", "banquet", "bargain", "battery", "bedroom", "beehive",
    "believe", "benefit", "bicycle", "billion", "biology", "biscuit", "blanket", "blossom", "bonfire", "bouquet",
    "bracket", "brother", "buffalo", "builder", "butcher", "buzzard", "cabinet", "calcium", "capable", "capital",
    "capsule", "captain", "caption", "caramel", "careful", "cartoon", "catalog", "caution", "ceiling", "certain",
    "chamber", "chapter", "chariot", "chimney", "chronic", "citizen", "clarify", "cluster", "coconut", "collect",
    "combine", "comfort", "company", "compass", "concept", "concert", "conduct", "confirm", "connect", "control",
    "convert", "correct", "costume", "cottage", "council", "country", "courage", "cricket", "crumble", "crystal",
    "culture", "cupcake", "curious", "current", "curtain", "cushion", "cypress", "decline", "defense", "deliver",
    "dentist", "deposit", "develop", "diagram", "diamond", "digital", "dignity", "dilemma", "dismiss", "display",
    "dolphin", "drastic", "drought", "dynamic", "eastern", "eclipse", "educate", "elegant", "element", "embrace",
    "emerald", "emotion", "empower", "endless", "endorse", "enforce", "enhance", "episode", "erosion", "essence",
    "eternal", "example", "exclude", "execute", "exhaust", "exhibit", "explain", "express", "faculty", "fantasy",
    "fashion", "fatigue", "feather", "federal", "fiction", "fifteen", "finance", "fitness", "fortune", "gallery",
    "garbage", "garment", "general", "genuine", "gesture", "giraffe", "glimpse", "goddess", "gravity", "grocery",
    "hamster", "harvest", "history", "holiday", "horizon", "hundred", "husband", "iceberg", "illegal", "imitate",
    "immense", "improve", "impulse", "include", "inflict", "inherit", "initial", "inquiry", "inspire", "install",
    "involve", "isolate", "janitor", "jasmine", "jealous", "journey", "ketchup", "kingdom", "kitchen", "lantern",
    "laundry", "lecture", "leisure", "leopard", "liberty", "library", "license", "lobster", "lottery", "luggage",
    "machine", "mammoth", "mandate", "mansion", "maximum", "medical", "mention", "message", "million", "minimum",
    "miracle", "mistake", "monitor", "morning", "mustard", "mystery", "neglect", "neither", "network", "neutral",
    "nominee", "notable", "nothing", "nuclear", "obscure", "observe", "obvious", "octopus", "opinion", "orchard",
    "origami", "ostrich", "outdoor", "outside", "panther", "payment", "peasant", "pelican", "penalty", "penguin",
    "perfect", "picture", "pilgrim", "pioneer", "popular", "portion", "pottery", "poverty", "predict", "prepare",
    "present", "prevent", "primary", "private", "problem", "process", "produce", "program", "project", "promote",
    "prosper", "protect", "provide", "pudding", "pumpkin", "purpose", "quality", "quantum", "quarter", "rainbow",
    "rebuild", "receive", "recycle", "reflect", "regular", "release", "replace", "require", "retreat", "reunion",
    "sadness", "satisfy", "sausage", "scatter", "scholar", "science", "section", "segment", "seminar", "service",
    "session", "shallow", "sheriff", "shuffle", "similar", "situate", "slender", "soldier", "someone", "sparrow",
    "spatial", "special", "sponsor", "squeeze", "stadium", "station", "stomach", "student", "stumble", "subject",
    "success", "suggest", "sunrise", "supreme", "surface", "suspect", "sustain", "swallow", "symptom", "thought",
    "thunder", "toddler", "tonight", "tornado", "tourist", "traffic", "trigger", "trouble", "trumpet", "tuition",
    "typical", "unaware", "unhappy", "unicorn", "uniform", "unknown", "unusual", "upgrade", "useless", "utility",
    "various", "vehicle", "venture", "version", "veteran", "vibrant", "victory", "village", "vintage", "virtual",
    "volcano", "warfare", "warrior", "weather", "website", "wedding", "weekend", "welcome", "whisker", "whisper",
    "witness", "wrestle",
    # eight letters
    "abstract", "airplane", "alphabet", "aquarium", "bachelor", "backpack", "baseball", "blizzard", "bluebird", "boundary",
    "calendar", "campfire", "cardinal", "carnival", "champion", "chestnut", "consider", "cupboard", "daffodil", "daughter",
    "decorate", "decrease", "describe", "dinosaur", "disagree", "discover", "disorder", "distance", "document", "electric",
    "elephant", "elevator", "envelope", "evidence", "exchange", "exercise", "favorite", "festival", "firework", "flamingo",
    "fortress", "frequent", "gardener", "hedgehog", "horseman", "hospital", "identify", "increase", "indicate", "industry",
    "innocent", "interest", "kangaroo", "keyboard", "ladybird", "language", "lemonade", "magazine", "mandolin", "marathon",
    "marriage", "material", "mechanic", "midnight", "mountain", "multiply", "mushroom", "negative", "notebook", "ornament",
    "painting", "panorama", "physical", "pinecone", "pinwheel", "platinum", "position", "possible", "practice", "priority",
    "property", "purchase", "question", "reindeer", "remember", "resemble", "resource", "response", "sandwich", "scissors",
    "scorpion", "seashell", "security", "sentence", "shoulder", "skeleton", "snowball", "solution", "squirrel", "starfish",
    "strategy", "struggle", "sunlight", "surprise", "surround", "together", "tomorrow", "tortoise", "transfer", "treasure",
    "umbrella", "universe", "vineyard", "woodland",
)
