"""
Russian Cyrillic romanization: GOST 7.79-2000 System B (default),
BGN/PCGN, scientific (ISO 9) and a simplified ASCII scheme.

Dictionary lookup is case-insensitive.  Rules cover the soft and hard
signs and word-initial ё.
"""

from __future__ import annotations

from polytranslit.rules import RuleContext, RuleHit
from polytranslit.scripts import ScriptKind
from polytranslit.tables import SchemeInfo, ScriptTable


GOST_LOWER = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "yo",
    "ж": "zh", "з": "z", "и": "i", "й": "j", "к": "k", "л": "l", "м": "m",
    "н": "n", "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
    "ф": "f", "х": "kh", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "shch",
    "ъ": '"', "ы": "y", "ь": "'", "э": "e`", "ю": "yu", "я": "ya",
}


def _with_capitals(lower: dict[str, str]) -> dict[str, str]:
    """Add the capital letters, capitalizing the first output letter."""
    table = dict(lower)
    for char, latin in lower.items():
        table[char.upper()] = latin[:1].upper() + latin[1:]
    return table


GOST = _with_capitals(GOST_LOWER)

OVERLAYS = {
    "bgn": _with_capitals({"э": "e"}),
    "scientific": _with_capitals({
        "ё": "ë", "ж": "ž", "х": "h", "ц": "c", "ч": "č", "ш": "š",
        "щ": "ŝ", "ъ": "ʺ", "ь": "ʹ", "э": "è", "ю": "û", "я": "â",
    }),
    "simplified": _with_capitals({
        "ё": "e", "х": "h", "щ": "sch", "ъ": "", "ь": "", "э": "e",
    }),
}

VOWELS = frozenset("аеёиоуыэюяАЕЁИОУЫЭЮЯ")


WORDS = {
    # greetings
    "привет": "privet", "здравствуй": "zdravstvuj", "здравствуйте": "zdravstvujte",
    "добро пожаловать": "dobro pozhalovat'", "до свидания": "do svidaniya",
    "пока": "poka", "увидимся": "uvidimsya", "спокойной ночи": "spokojnoj nochi",
    "доброе утро": "dobroye utro", "добрый день": "dobryj den'",
    "добрый вечер": "dobryj vecher",
    # common words
    "да": "da", "нет": "net", "спасибо": "spasibo", "пожалуйста": "pozhalujsta",
    "извините": "izvinite", "простите": "prostite", "конечно": "konechno",
    "может быть": "mozhet byt'", "хорошо": "khorosho", "плохо": "plokho",
    "очень": "ochen'", "много": "mnogo", "мало": "malo", "большой": "bol'shoj",
    "маленький": "malen'kij", "новый": "novyj", "старый": "staryj",
    "красивый": "krasivyj",
    # family
    "семья": "sem'ya", "мать": "mat'", "мама": "mama", "отец": "otets",
    "папа": "papa", "сын": "syn", "дочь": "doch'", "брат": "brat",
    "сестра": "sestra", "дедушка": "dedushka", "бабушка": "babushka",
    "дядя": "dyadya", "тётя": "tyotya", "муж": "muzh", "жена": "zhena",
    "ребёнок": "rebyonok", "дети": "deti",
    # numbers
    "один": "odin", "два": "dva", "три": "tri", "четыре": "chetyre",
    "пять": "pyat'", "шесть": "shest'", "семь": "sem'", "восемь": "vosem'",
    "девять": "devyat'", "десять": "desyat'", "одиннадцать": "odinnadtsat'",
    "двенадцать": "dvenadtsat'", "тринадцать": "trinadtsat'",
    "двадцать": "dvadtsat'", "тридцать": "tridtsat'", "сорок": "sorok",
    "пятьдесят": "pyat'desyat", "сто": "sto", "тысяча": "tysyacha",
    "миллион": "million",
    # time
    "время": "vremya", "час": "chas", "минута": "minuta", "секунда": "sekunda",
    "день": "den'", "неделя": "nedelya", "месяц": "mesyats", "год": "god",
    "сегодня": "segodnya", "вчера": "vchera", "завтра": "zavtra",
    "сейчас": "sejchas", "утром": "utrom", "днём": "dnyom",
    "вечером": "vecherom", "ночью": "noch'yu", "понедельник": "ponedel'nik",
    "вторник": "vtornik", "среда": "sreda", "четверг": "chetverg",
    "пятница": "pyatnitsa", "суббота": "subbota", "воскресенье": "voskresen'e",
    # colours
    "цвет": "tsvet", "белый": "belyj", "чёрный": "chyornyj",
    "красный": "krasnyj", "синий": "sinij", "зелёный": "zelyonyj",
    "жёлтый": "zhyoltyj", "оранжевый": "oranzhevyj",
    "фиолетовый": "fioletovyj", "розовый": "rozovyj", "серый": "seryj",
    "коричневый": "korichnevyj",
    # body
    "тело": "telo", "голова": "golova", "лицо": "litso", "глаз": "glaz",
    "глаза": "glaza", "нос": "nos", "рот": "rot", "ухо": "ukho", "уши": "ushi",
    "рука": "ruka", "руки": "ruki", "нога": "noga", "ноги": "nogi",
    "палец": "palets", "сердце": "serdtse",
    # verbs
    "быть": "byt'", "есть": "est'", "иметь": "imet'", "делать": "delat'",
    "говорить": "govorit'", "сказать": "skazat'", "знать": "znat'",
    "думать": "dumat'", "хотеть": "khotet'", "мочь": "moch'",
    "видеть": "videt'", "слышать": "slyshat'", "читать": "chitat'",
    "писать": "pisat'", "работать": "rabotat'", "учиться": "uchit'sya",
    "жить": "zhit'", "идти": "idti", "ехать": "ekhat'", "покупать": "pokupat'",
    "продавать": "prodavat'", "пить": "pit'", "спать": "spat'",
    "играть": "igrat'", "смотреть": "smotret'", "слушать": "slushat'",
    "понимать": "ponimat'", "любить": "lyubit'", "помогать": "pomogat'",
    # food
    "еда": "eda", "пища": "pishcha", "завтрак": "zavtrak", "обед": "obed",
    "ужин": "uzhin", "хлеб": "khleb", "молоко": "moloko", "мясо": "myaso",
    "рыба": "ryba", "курица": "kuritsa", "овощи": "ovoshchi",
    "фрукты": "frukty", "яблоко": "yabloko", "банан": "banan",
    "апельсин": "apel'sin", "картофель": "kartofel'", "морковь": "morkov'",
    "лук": "luk", "помидор": "pomidor", "огурец": "ogurets", "сыр": "syr",
    "масло": "maslo", "сахар": "sakhar", "соль": "sol'", "вода": "voda",
    "чай": "chaj", "кофе": "kofe", "сок": "sok", "пиво": "pivo", "вино": "vino",
    # places
    "место": "mesto", "страна": "strana", "город": "gorod",
    "деревня": "derevnya", "дом": "dom", "квартира": "kvartira",
    "комната": "komnata", "кухня": "kukhnya", "ванная": "vannaya",
    "спальня": "spal'nya", "гостиная": "gostinaya", "школа": "shkola",
    "университет": "universitet", "больница": "bol'nitsa",
    "магазин": "magazin", "ресторан": "restoran", "кафе": "kafe",
    "гостиница": "gostinitsa", "аэропорт": "aeroport", "вокзал": "vokzal",
    "музей": "muzej", "театр": "teatr", "кино": "kino", "парк": "park",
    "улица": "ulitsa", "дорога": "doroga", "мост": "most",
    # countries and cities
    "Россия": "Rossiya", "Москва": "Moskva", "Санкт-Петербург": "Sankt-Peterburg",
    "Америка": "Amerika", "Англия": "Angliya", "Франция": "Frantsiya",
    "Германия": "Germaniya", "Китай": "Kitaj", "Япония": "Yaponiya",
    # weather
    "погода": "pogoda", "солнце": "solntse", "дождь": "dozhd'", "снег": "sneg",
    "ветер": "veter", "облако": "oblako", "туман": "tuman",
    "холодно": "kholodno", "тепло": "teplo", "жарко": "zharko",
    "прохладно": "prokhladno",
    # transport
    "транспорт": "transport", "машина": "mashina", "автобус": "avtobus",
    "троллейбус": "trollejbus", "трамвай": "tramvaj", "метро": "metro",
    "поезд": "poezd", "самолёт": "samolyot", "корабль": "korabl'",
    "велосипед": "velosiped", "мотоцикл": "mototsikl", "такси": "taksi",
    # feelings
    "чувство": "chuvstvo", "радость": "radost'", "счастье": "schast'e",
    "грусть": "grust'", "печаль": "pechal'", "злость": "zlost'", "гнев": "gnev",
    "страх": "strakh", "удивление": "udivlenie", "любовь": "lyubov'",
    "ненависть": "nenavist'",
    # work and study
    "работа": "rabota", "профессия": "professiya", "учитель": "uchitel'",
    "студент": "student", "врач": "vrach", "инженер": "inzhener",
    "программист": "programmist", "менеджер": "menedzher",
    "директор": "direktor", "секретарь": "sekretar'", "урок": "urok",
    "лекция": "lektsiya", "экзамен": "ekzamen", "задание": "zadanie",
    "книга": "kniga", "тетрадь": "tetrad'", "ручка": "ruchka",
    "карандаш": "karandash",
    # technology
    "компьютер": "komp'yuter", "интернет": "internet", "телефон": "telefon",
    "мобильный": "mobil'nyj", "планшет": "planshet", "телевизор": "televizor",
    "радио": "radio", "фотография": "fotografiya", "видео": "video",
    "музыка": "muzyka", "игра": "igra",
    # money
    "деньги": "den'gi", "рубль": "rubl'", "доллар": "dollar", "евро": "evro",
    "цена": "tsena", "дорогой": "dorogoj", "дешёвый": "deshyovyj",
    "скидка": "skidka", "касса": "kassa", "чек": "chek", "покупка": "pokupka",
    "продажа": "prodazha",
}


# ── Rules ───────────────────────────────────────────────────────────────────

def soft_sign(ctx: RuleContext) -> RuleHit | None:
    """ь before a vowel is pronounced as y; elsewhere it follows the scheme."""
    if ctx.current not in ("ь", "Ь"):
        return None
    if ctx.char(1) in VOWELS:
        return RuleHit("y", 1, "soft_sign")
    return RuleHit(ctx.lookup(ctx.current) or "", 1, "soft_sign")


def hard_sign(ctx: RuleContext) -> RuleHit | None:
    if ctx.current not in ("ъ", "Ъ"):
        return None
    return RuleHit(ctx.lookup(ctx.current) or "", 1, "hard_sign")


def initial_yo(ctx: RuleContext) -> RuleHit | None:
    """Word-initial ё is always iotated (plain e in the simplified scheme)."""
    if ctx.current not in ("ё", "Ё") or not ctx.at_word_start:
        return None
    latin = "e" if ctx.scheme == "simplified" else "yo"
    if ctx.current.isupper():
        latin = latin.capitalize()
    return RuleHit(latin, 1, "initial_yo")


RULES = (soft_sign, hard_sign, initial_yo)


TABLE = ScriptTable(
    name="russian",
    display_name="Russian",
    kinds=frozenset({ScriptKind.CYRILLIC}),
    schemes=(
        SchemeInfo("gost", "GOST 7.79-2000 System B",
                   "Russian federal standard for Cyrillic transliteration"),
        SchemeInfo("bgn", "BGN/PCGN",
                   "US Board on Geographic Names / Permanent Committee on Geographical Names"),
        SchemeInfo("scientific", "Scientific (ISO 9:1995)",
                   "Academic transliteration with diacritics"),
        SchemeInfo("simplified", "Simplified", "Easy-to-read ASCII transliteration"),
    ),
    char_map=GOST,
    overlays=OVERLAYS,
    phrases=WORDS,
    max_phrase_length=20,
    case_insensitive=True,
)
