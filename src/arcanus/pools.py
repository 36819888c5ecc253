VOWELS: tuple[str, ...] = ("a", "e", "i", "o", "u")

CONSONANTS: tuple[str, ...] = (
    "b",
    "c",
    "d",
    "f",
    "g",
    "h",
    "j",
    "k",
    "l",
    "m",
    "n",
    "p",
    "q",
    "r",
    "s",
    "t",
    "v",
    "w",
    "x",
    "y",
    "z",
)

DIGITS: tuple[str, ...] = ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9")

SYMBOLS: tuple[str, ...] = ("!", "+", "#", "/", "$", "?")


# Letters count twice for upper and lower case
ENTROPY_POOL_SIZE: int = (len(VOWELS) + len(CONSONANTS)) * 2 + len(DIGITS) + len(SYMBOLS)
