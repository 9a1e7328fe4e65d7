"""
Mandarin Chinese romanization (Hanyu Pinyin with tone marks).

Characters map to their most common reading; the phrase dictionary
carries the readings that change in context (neutral tones, tone sandhi
of 一 and 不).  Syllables are written space-separated.  Tone marks can be
stripped or turned into trailing tone numbers at format time.
"""

from __future__ import annotations

from polytranslit.scripts import ScriptKind
from polytranslit.tables import SchemeInfo, ScriptTable


CHARACTERS = {
    # pronouns and particles
    "你": "nǐ", "您": "nín", "我": "wǒ", "他": "tā", "她": "tā", "它": "tā",
    "们": "men", "的": "de", "了": "le", "吗": "ma", "呢": "ne", "吧": "ba",
    "啊": "a", "么": "me", "得": "de", "着": "zhe", "过": "guò",
    "这": "zhè", "那": "nà", "哪": "nǎ", "谁": "shéi", "什": "shén",
    "怎": "zěn", "样": "yàng", "自": "zì", "己": "jǐ", "大": "dà",
    "家": "jiā",
    # common verbs
    "是": "shì", "在": "zài", "有": "yǒu", "没": "méi", "不": "bù",
    "来": "lái", "去": "qù", "说": "shuō", "话": "huà", "看": "kàn",
    "听": "tīng", "吃": "chī", "喝": "hē", "买": "mǎi", "卖": "mài",
    "学": "xué", "走": "zǒu", "跑": "pǎo", "坐": "zuò", "爱": "ài",
    "出": "chū", "会": "huì", "可": "kě", "以": "yǐ", "要": "yào",
    "想": "xiǎng", "知": "zhī", "道": "dào", "做": "zuò", "作": "zuò",
    "用": "yòng", "能": "néng", "给": "gěi", "让": "ràng", "找": "zhǎo",
    "等": "děng", "帮": "bāng", "问": "wèn", "写": "xiě", "读": "dú",
    "叫": "jiào", "住": "zhù", "见": "jiàn", "请": "qǐng", "喜": "xǐ",
    "欢": "huān", "开": "kāi", "关": "guān", "回": "huí", "认": "rèn",
    "识": "shí", "考": "kǎo", "试": "shì", "教": "jiào", "习": "xí",
    "迎": "yíng", "起": "qǐ", "谢": "xiè", "对": "duì",
    # adverbs and connectives
    "也": "yě", "很": "hěn", "都": "dōu", "就": "jiù", "还": "hái",
    "再": "zài", "真": "zhēn", "太": "tài", "最": "zuì", "更": "gèng",
    "非": "fēi", "常": "cháng", "已": "yǐ", "经": "jīng", "正": "zhèng",
    "和": "hé", "从": "cóng", "到": "dào", "为": "wèi", "因": "yīn",
    "所": "suǒ", "但": "dàn", "如": "rú", "先": "xiān", "现": "xiàn",
    # numbers and measure words
    "一": "yī", "二": "èr", "三": "sān", "四": "sì", "五": "wǔ",
    "六": "liù", "七": "qī", "八": "bā", "九": "jiǔ", "十": "shí",
    "百": "bǎi", "千": "qiān", "万": "wàn", "亿": "yì", "零": "líng",
    "两": "liǎng", "半": "bàn", "第": "dì", "次": "cì", "个": "gè",
    "只": "zhǐ", "几": "jǐ", "多": "duō", "少": "shǎo", "岁": "suì",
    "号": "hào", "点": "diǎn", "分": "fēn", "钟": "zhōng",
    # time
    "时": "shí", "候": "hòu", "年": "nián", "月": "yuè", "日": "rì",
    "天": "tiān", "今": "jīn", "明": "míng", "昨": "zuó", "晚": "wǎn",
    "早": "zǎo", "午": "wǔ", "星": "xīng", "期": "qī",
    # people
    "人": "rén", "爸": "bà", "妈": "mā", "儿": "ér", "女": "nǚ", "子": "zǐ",
    "孩": "hái", "男": "nán", "朋": "péng", "友": "yǒu", "同": "tóng",
    "事": "shì", "老": "lǎo", "师": "shī", "生": "shēng", "板": "bǎn",
    "妻": "qī", "夫": "fū", "哥": "gē", "姐": "jiě", "弟": "dì", "妹": "mèi",
    "名": "míng", "字": "zì", "姓": "xìng",
    # places and directions
    "中": "zhōng", "国": "guó", "上": "shàng", "下": "xià", "里": "lǐ",
    "外": "wài", "前": "qián", "后": "hòu", "左": "zuǒ", "右": "yòu",
    "边": "biān", "东": "dōng", "西": "xī", "南": "nán", "北": "běi",
    "京": "jīng", "海": "hǎi", "山": "shān", "江": "jiāng", "河": "hé",
    "地": "dì", "方": "fāng", "世": "shì", "界": "jiè", "市": "shì",
    "城": "chéng", "村": "cūn", "路": "lù", "门": "mén", "校": "xiào",
    "医": "yī", "院": "yuàn", "店": "diàn", "商": "shāng", "场": "chǎng",
    "公": "gōng", "司": "sī", "站": "zhàn", "室": "shì", "班": "bān",
    "课": "kè", "工": "gōng",
    # things
    "水": "shuǐ", "茶": "chá", "饭": "fàn", "肉": "ròu", "菜": "cài",
    "钱": "qián", "书": "shū", "车": "chē", "米": "mǐ", "面": "miàn",
    "鱼": "yú", "鸡": "jī", "蛋": "dàn", "酒": "jiǔ", "果": "guǒ",
    "苹": "píng", "咖": "kā", "啡": "fēi", "电": "diàn", "脑": "nǎo",
    "机": "jī", "影": "yǐng", "视": "shì", "飞": "fēi", "船": "chuán",
    "票": "piào", "租": "zū", "文": "wén", "语": "yǔ", "汉": "hàn",
    "英": "yīng", "题": "tí", "法": "fǎ", "德": "dé", "本": "běn",
    # nature and animals
    "火": "huǒ", "木": "mù", "金": "jīn", "土": "tǔ", "风": "fēng",
    "雨": "yǔ", "雪": "xuě", "花": "huā", "草": "cǎo", "树": "shù",
    "狗": "gǒu", "猫": "māo", "马": "mǎ", "牛": "niú", "羊": "yáng",
    # body
    "头": "tóu", "眼": "yǎn", "睛": "jīng", "鼻": "bí", "嘴": "zuǐ",
    "耳": "ěr", "手": "shǒu", "脚": "jiǎo", "心": "xīn", "身": "shēn",
    "体": "tǐ", "口": "kǒu", "病": "bìng",
    # qualities and colours
    "好": "hǎo", "小": "xiǎo", "新": "xīn", "旧": "jiù", "高": "gāo",
    "长": "cháng", "快": "kuài", "慢": "màn", "冷": "lěng", "热": "rè",
    "美": "měi", "忙": "máng", "累": "lèi", "客": "kè", "气": "qì",
    "兴": "xìng", "红": "hóng", "黄": "huáng", "蓝": "lán", "绿": "lǜ",
    "白": "bái", "黑": "hēi", "灰": "huī", "紫": "zǐ",
}

PHRASES = {
    # greetings and courtesy
    "你好": "nǐ hǎo", "您好": "nín hǎo", "谢谢": "xiè xie",
    "不客气": "bú kè qi", "对不起": "duì bu qǐ", "没关系": "méi guān xi",
    "再见": "zài jiàn", "早上好": "zǎo shang hǎo", "晚上好": "wǎn shang hǎo",
    "请问": "qǐng wèn", "欢迎": "huān yíng", "认识": "rèn shi",
    "高兴": "gāo xìng", "喜欢": "xǐ huan",
    # people
    "我们": "wǒ men", "你们": "nǐ men", "他们": "tā men", "大家": "dà jiā",
    "朋友": "péng you", "老师": "lǎo shī", "学生": "xué sheng",
    "先生": "xiān sheng", "妈妈": "mā ma", "爸爸": "bà ba", "哥哥": "gē ge",
    "姐姐": "jiě jie", "弟弟": "dì di", "妹妹": "mèi mei", "孩子": "hái zi",
    "儿子": "ér zi", "女儿": "nǚ ér", "名字": "míng zi",
    # places
    "世界": "shì jiè", "中国": "zhōng guó", "中国人": "zhōng guó rén",
    "北京": "běi jīng", "上海": "shàng hǎi", "学校": "xué xiào",
    "医院": "yī yuàn",
    # language
    "中文": "zhōng wén", "汉语": "hàn yǔ", "英语": "yīng yǔ",
    # question words
    "什么": "shén me", "怎么样": "zěn me yàng", "为什么": "wèi shén me",
    # things
    "东西": "dōng xi", "苹果": "píng guǒ", "咖啡": "kā fēi",
    "电脑": "diàn nǎo", "电话": "diàn huà", "飞机": "fēi jī",
    "火车": "huǒ chē", "出租车": "chū zū chē", "身体": "shēn tǐ",
    # time
    "时候": "shí hou", "今天": "jīn tiān", "明天": "míng tiān",
    "昨天": "zuó tiān", "现在": "xiàn zài", "星期": "xīng qī",
    # verbs and connectives
    "知道": "zhī dào", "工作": "gōng zuò", "可以": "kě yǐ", "没有": "méi yǒu",
    "已经": "yǐ jīng", "非常": "fēi cháng", "因为": "yīn wèi",
    "所以": "suǒ yǐ", "但是": "dàn shì", "如果": "rú guǒ", "自己": "zì jǐ",
    # tone sandhi of 一 and 不
    "一起": "yì qǐ", "一样": "yí yàng", "一点": "yì diǎn", "不是": "bú shì",
    "不要": "bú yào", "不会": "bú huì",
    "我爱你": "wǒ ài nǐ",
}

TONE_STRIP = {
    "ā": "a", "á": "a", "ǎ": "a", "à": "a",
    "ē": "e", "é": "e", "ě": "e", "è": "e",
    "ī": "i", "í": "i", "ǐ": "i", "ì": "i",
    "ō": "o", "ó": "o", "ǒ": "o", "ò": "o",
    "ū": "u", "ú": "u", "ǔ": "u", "ù": "u",
    "ǖ": "v", "ǘ": "v", "ǚ": "v", "ǜ": "v",
}

TONE_NUMBERS = {
    marked: plain + str(tone)
    for vowels, plain in (
        ("āáǎà", "a"), ("ēéěè", "e"), ("īíǐì", "i"),
        ("ōóǒò", "o"), ("ūúǔù", "u"), ("ǖǘǚǜ", "v"),
    )
    for tone, marked in enumerate(vowels, start=1)
}

PUNCTUATION = {
    "，": ", ", "。": ".", "！": "!", "？": "?", "：": ": ", "；": "; ",
    "、": ", ", "（": " (", "）": ") ", "【": "[", "】": "]",
    "“": '"', "”": '"', "‘": "'", "’": "'", "《": '"', "》": '"',
    "…": "...",
}

TABLE = ScriptTable(
    name="mandarin",
    display_name="Mandarin Chinese",
    kinds=frozenset({ScriptKind.KANJI}),
    schemes=(SchemeInfo("pinyin", "Hanyu Pinyin", "Standard Mandarin romanization with tone marks"),),
    char_map=CHARACTERS,
    phrases=PHRASES,
    max_phrase_length=8,
    punctuation=PUNCTUATION,
    spaced_kinds=frozenset({ScriptKind.KANJI}),
    requires_word_boundary=False,
    tone_strip=TONE_STRIP,
    tone_numbers=TONE_NUMBERS,
)

RULES = ()
