"""Default separator lists used to split text into tokens.

``DEFAULT_SEPARATORS`` holds every character of the Unicode punctuation
categories (Pc, Pd, Pe, Pf, Pi, Po, Ps) and of the separator categories
(Zl, Zp, Zs). It also holds ". ", ", " and "។ល។" (the decomposition of
"៘"), so that these sequences are matched as single hard separators.

``CONTEXT_SEPARATORS`` holds the separators that end a phrase or a context.
Between two tokens they count as hard separators; the other separators
count as soft ones.
"""

DEFAULT_SEPARATORS: tuple[str, ...] = (
    ". ", ", ", "_", "‿", "⁀", "⁔", "︳", "︴", "﹍", "﹎", "﹏", "＿", "-", "֊", "־", "᐀", "᠆", "‐", "‒", "–",
    "—", "―", "⸗", "⸚", "⸺", "⸻", "⹀", "〜", "〰", "゠", "︱", "︲", "﹘", "﹣", "－", "𐺭", ")",
    "]", "}", "༻", "༽", "᚜", "⁆", "⁾", "₎", "⌉", "⌋", "\u232a", "❩", "❫", "❭", "❯", "❱", "❳", "❵", "⟆",
    "⟧", "⟩", "⟫", "⟭", "⟯", "⦄", "⦆", "⦈", "⦊", "⦌", "⦎", "⦐", "⦒", "⦔", "⦖", "⦘", "⧙", "⧛", "⧽",
    "⸣", "⸥", "⸧", "⸩", "〉", "》", "」", "』", "】", "〕", "〗", "〙", "〛", "〞", "〟", "﴾",
    "︘", "︶", "︸", "︺", "︼", "︾", "﹀", "﹂", "﹄", "﹈", "﹚", "﹜", "﹞", "）", "］", "｝",
    "｠", "｣", "»", "’", "”", "›", "⸃", "⸅", "⸊", "⸍", "⸝", "⸡", "«", "‘", "‛", "“", "‟", "‹", "⸂",
    "⸄", "⸉", "⸌", "⸜", "⸠", "(", "[", "{", "༺", "༼", "᚛", "‚", "„", "⁅", "⁽", "₍", "⌈", "⌊", "\u2329",
    "❨", "❪", "❬", "❮", "❰", "❲", "❴", "⟅", "⟦", "⟨", "⟪", "⟬", "⟮", "⦃", "⦅", "⦇", "⦉", "⦋", "⦍",
    "⦏", "⦑", "⦓", "⦕", "⦗", "⧘", "⧚", "⧼", "⸢", "⸤", "⸦", "⸨", "⹂", "〈", "《", "「", "『", "【",
    "〔", "〖", "〘", "〚", "〝", "﴿", "︗", "︵", "︷", "︹", "︻", "︽", "︿", "﹁", "﹃", "﹇",
    "﹙", "﹛", "﹝", "（", "［", "｛", "｟", "｢", "!", "\"", "#", "%", "&", "'", "*", ",", ".",
    "/", ":", ";", "?", "@", "\\", "¡", "§", "¶", "·", "¿", "\u037e", "\u0387", "՚", "՛", "՜", "՝", "՞", "՟",
    "։", "׀", "׃", "׆", "׳", "״", "؉", "؊", "،", "؍", "؛", "؞", "؟", "٪", "٭", "۔", "܀", "܁", "܂",
    "܃", "܄", "܅", "܆", "܇", "܈", "܉", "܊", "܋", "܌", "܍", "߷", "߸", "߹", "࠰", "࠱", "࠲", "࠳", "࠴",
    "࠵", "࠶", "࠷", "࠸", "࠹", "࠺", "࠻", "࠼", "࠽", "࠾", "࡞", "।", "॥", "॰", "৽", "੶", "૰", "౷", "಄",
    "෴", "๏", "๚", "๛", "༄", "༅", "༆", "༇", "༈", "༉", "༊", "་", "།", "༎", "༏", "༐", "༑", "༒", "༔",
    "྅", "࿐", "࿑", "࿒", "࿓", "࿔", "࿙", "࿚", "၊", "။", "၌", "၍", "၎", "၏", "჻", "፠", "፡", "።", "፣",
    "፤", "፥", "፦", "፧", "፨", "᙮", "᛫", "᛬", "᛭", "᜵", "᜶", "។ល។", "។", "៕", "៖", "៘", "៙", "៚", "᠀", "᠁",
    "᠂", "᠃", "᠄", "᠅", "᠇", "᠈", "᠉", "᠊", "᥄", "᥅", "᨞", "᨟", "᪠", "᪡", "᪢", "᪣", "᪤", "᪥", "᪦",
    "᪨", "᪩", "᪪", "᪫", "᪬", "᪭", "᭚", "᭛", "᭜", "᭝", "᭞", "᭟", "᭠", "᯼", "᯽", "᯾", "᯿", "᰻", "᰼",
    "᰽", "᰾", "᰿", "᱾", "᱿", "᳀", "᳁", "᳂", "᳃", "᳄", "᳅", "᳆", "᳇", "᳓", "‖", "‗", "†", "‡", "•",
    "‣", "․", "‥", "…", "‧", "‰", "‱", "′", "″", "‴", "‵", "‶", "‷", "‸", "※", "‼", "‽", "‾", "⁁",
    "⁂", "⁃", "⁇", "⁈", "⁉", "⁊", "⁋", "⁌", "⁍", "⁎", "⁏", "⁐", "⁑", "⁓", "⁕", "⁖", "⁗", "⁘", "⁙",
    "⁚", "⁛", "⁜", "⁝", "⁞", "⳹", "⳺", "⳻", "⳼", "⳾", "⳿", "⵰", "⸀", "⸁", "⸆", "⸇", "⸈", "⸋", "⸎",
    "⸏", "⸐", "⸑", "⸒", "⸓", "⸔", "⸕", "⸖", "⸘", "⸙", "⸛", "⸞", "⸟", "⸪", "⸫", "⸬", "⸭", "⸮", "⸰",
    "⸱", "⸲", "⸳", "⸴", "⸵", "⸶", "⸷", "⸸", "⸹", "⸼", "⸽", "⸾", "⸿", "⹁", "⹃", "⹄", "⹅", "⹆", "⹇",
    "⹈", "⹉", "⹊", "⹋", "⹌", "⹍", "⹎", "⹏", "⹒", "、", "。", "〃", "〽", "・", "꓾", "꓿", "꘍", "꘎",
    "꘏", "꙳", "꙾", "꛲", "꛳", "꛴", "꛵", "꛶", "꛷", "꡴", "꡵", "꡶", "꡷", "꣎", "꣏", "꣸", "꣹", "꣺", "꣼",
    "꤮", "꤯", "꥟", "꧁", "꧂", "꧃", "꧄", "꧅", "꧆", "꧇", "꧈", "꧉", "꧊", "꧋", "꧌", "꧍", "꧞", "꧟", "꩜",
    "꩝", "꩞", "꩟", "꫞", "꫟", "꫰", "꫱", "꯫", "︐", "︑", "︒", "︓", "︔", "︕", "︖", "︙", "︰",
    "﹅", "﹆", "﹉", "﹊", "﹋", "﹌", "﹐", "﹑", "﹒", "﹔", "﹕", "﹖", "﹗", "﹟", "﹠", "﹡",
    "﹨", "﹪", "﹫", "！", "＂", "＃", "％", "＆", "＇", "＊", "，", "．", "／", "：", "；", "？",
    "＠", "＼", "｡", "､", "･", "𐄀", "𐄁", "𐄂", "𐎟", "𐏐", "𐕯", "𐡗", "𐤟", "𐤿", "𐩐", "𐩑", "𐩒", "𐩓",
    "𐩔", "𐩕", "𐩖", "𐩗", "𐩘", "𐩿", "𐫰", "𐫱", "𐫲", "𐫳", "𐫴", "𐫵", "𐫶", "𐬹", "𐬺", "𐬻", "𐬼", "𐬽", "𐬾",
    "𐬿", "𐮙", "𐮚", "𐮛", "𐮜", "𐽕", "𐽖", "𐽗", "𐽘", "𐽙", "𑁇", "𑁈", "𑁉", "𑁊", "𑁋", "𑁌", "𑁍", "𑂻", "𑂼",
    "𑂾", "𑂿", "𑃀", "𑃁", "𑅀", "𑅁", "𑅂", "𑅃", "𑅴", "𑅵", "𑇅", "𑇆", "𑇇", "𑇈", "𑇍", "𑇛", "𑇝", "𑇞", "𑇟",
    "𑈸", "𑈹", "𑈺", "𑈻", "𑈼", "𑈽", "𑊩", "𑑋", "𑑌", "𑑍", "𑑎", "𑑏", "𑑚", "𑑛", "𑑝", "𑓆", "𑗁", "𑗂", "𑗃",
    "𑗄", "𑗅", "𑗆", "𑗇", "𑗈", "𑗉", "𑗊", "𑗋", "𑗌", "𑗍", "𑗎", "𑗏", "𑗐", "𑗑", "𑗒", "𑗓", "𑗔", "𑗕", "𑗖",
    "𑗗", "𑙁", "𑙂", "𑙃", "𑙠", "𑙡", "𑙢", "𑙣", "𑙤", "𑙥", "𑙦", "𑙧", "𑙨", "𑙩", "𑙪", "𑙫", "𑙬", "𑜼", "𑜽",
    "𑜾", "𑠻", "𑥄", "𑥅", "𑥆", "𑧢", "𑨿", "𑩀", "𑩁", "𑩂", "𑩃", "𑩄", "𑩅", "𑩆", "𑪚", "𑪛", "𑪜", "𑪞", "𑪟",
    "𑪠", "𑪡", "𑪢", "𑱁", "𑱂", "𑱃", "𑱄", "𑱅", "𑱰", "𑱱", "𑻷", "𑻸", "𑿿", "𒑰", "𒑱", "𒑲", "𒑳", "𒑴", "𖩮",
    "𖩯", "𖫵", "𖬷", "𖬸", "𖬹", "𖬺", "𖬻", "𖭄", "𖺗", "𖺘", "𖺙", "𖺚", "𖿢", "𛲟", "𝪇", "𝪈", "𝪉", "𝪊", "𝪋",
    "𞥞", "𞥟", "\n", "\r", "\u2029",
    # Space separators (Zs).
    " ", "\u00a0", "\u1680", "\u2000", "\u2001", "\u2002", "\u2003", "\u2004", "\u2005", "\u2006",
    "\u2007", "\u2008", "\u2009", "\u200a", "\u202f", "\u205f", "\u3000",
)

CONTEXT_SEPARATORS: tuple[str, ...] = (
    "᠆",  # Mongolian todo soft hyphen, ends a paragraph
    "᚛", "᚜",  # Ogham, start and end of text
    "!", ". ", ", ", ";", "?", "¡", "§", "¶", "¿", "\u037e",  # Latin
    "՜",  # Armenian exclamation mark
    "՝",  # Armenian comma
    "՞",  # Armenian question mark
    "։",  # Armenian full stop
    "׃",  # end of a passage
    "،",  # Arabic comma
    "؛",  # Arabic semicolon
    "؟",  # reversed question mark
    "۔",  # Arabic full stop
    "܀", "܁", "܂",  # Syriac full stops
    "܃", "܄", "܅", "܆", "܇", "܈", "܉",  # Syriac semicolon and colon
    "߷",  # NKo end of a major section
    "߸",  # NKo comma
    "߹",  # NKo exclamation mark
    "࠰", "࠱", "࠲", "࠳", "࠴", "࠵", "࠸", "࠹", "࠺", "࠻", "࠼", "࠽",
    "࠾",  # Samaritan
    "࡞",  # Mandaic
    "।", "॥",  # Devanagari
    "෴",  # Sinhala
    "๚", "๛",  # Thai
    "༄", "༅", "༆", "༇", "༈", "༉", "༊", "།", "༎", "༏", "༐", "༑", "༒", "༔", "࿐", "࿑", "࿒", "࿓", "࿔",  # Tibetan
    "၊", "။",  # Myanmar
    "჻",  # Georgian paragraph separator
    "።", "፣", "፤", "፥", "፦", "፧", "፨",  # Ethiopic
    "᛫", "᛬", "᛭",  # Runic
    "᜵", "᜶",  # Philippine
    "។", "៕", "៖", "៘", "។ល។", "៚",  # Khmer
    "᠀", "᠁", "᠂", "᠃", "᠄", "᠅", "᠈", "᠉",  # Mongolian
    "᥄", "᥅",  # Limbu
    "᨟",  # Buginese
    "᪨", "᪩", "᪪", "᪫", "᪬", "᪭",  # Tai
    "᭚", "᭛", "᭜", "᭝", "᭞", "᭟", "᭠",  # Balinese
    "᯼", "᯽", "᯾", "᯿",  # Batak
    "᰻", "᰼", "᰽", "᰾", "᰿",  # Lepcha
    "᱾", "᱿",  # Ol Chiki
    "᳀", "᳁", "᳂", "᳃", "᳄", "᳅", "᳆", "᳇",  # Sundanese
    "․", "‥", "…", "※", "‼", "‽", "⁇", "⁈", "⁉", "⁏", "⁖", "⁚",  # general
    "⳹", "⳺", "⳻", "⳼", "⳾",  # Nubian
    "⸘", "⸮", "⹁",  # general, part 2
    "、", "。",  # CJK
    "꓾", "꓿",  # Lisu
    "꘍", "꘎", "꘏",  # Vai
    "꛲", "꛳", "꛴", "꛵", "꛶", "꛷",  # Bamum
    "꡶", "꡷",  # Phags-pa
    "꣎", "꣏",  # Saurashtra
    "꤯",  # Kayah Li
    "꥟",  # Rejang
    "꧃", "꧄", "꧅", "꧆", "꧇", "꧈", "꧉", "꧊", "꧋", "꧌", "꧍",  # Javanese
    "꩜", "꩝", "꩞", "꩟",  # Cham
    "꫟",  # Tai Viet
    "꫰", "꫱", "꯫",  # Meetei Mayek
    "︐", "︑", "︒", "︓", "︔", "︕", "︖", "︙", "︰", "﹅", "﹐", "﹑", "﹒", "﹔", "﹕", "﹖", "﹗",
    "！", "，", "．", "：", "；", "？", "｡", "､",  # general, part 3
    "𐡗",  # Imperial Aramaic section sign
    "𐩐", "𐩑", "𐩒", "𐩓", "𐩔", "𐩕", "𐩖", "𐩗", "𐩘",  # Kharoshthi
    "𐫰", "𐫱", "𐫲", "𐫳", "𐫴", "𐫵",  # Manichaean
    "𐬺", "𐬻", "𐬼", "𐬽", "𐬾", "𐬿",  # Avestan
    "𐮙", "𐮚", "𐮛", "𐮜",  # Psalter Pahlavi
    "𐽕", "𐽖", "𐽗", "𐽘", "𐽙",  # Sogdian
    "𑁇", "𑁈", "𑁉", "𑁊", "𑁋", "𑁌", "𑁍",  # Brahmi
    "𑂾", "𑂿", "𑃀", "𑃁",  # Kaithi
    "𑅀", "𑅁", "𑅂", "𑅃",  # Chakma
    "𑅵",  # Mahajani
    "𑇅", "𑇆", "𑇍", "𑇞", "𑇟",  # Sharada
    "𑈸", "𑈹", "𑈻", "𑈼",  # Khojki
    "𑊩",  # Multani
    "𑑋", "𑑌", "𑑍", "𑑚",  # Newa
    "𑗂", "𑗃", "𑗉", "𑗊", "𑗋", "𑗌", "𑗍", "𑗎", "𑗏", "𑗐", "𑗑", "𑗒", "𑗓", "𑗔", "𑗕", "𑗖", "𑗗",  # Siddham
    "𑙁", "𑙂",  # Modi
    "𑙠", "𑙡", "𑙢", "𑙣", "𑙤", "𑙥", "𑙦", "𑙧", "𑙨", "𑙩", "𑙪", "𑙫", "𑙬",  # Mongolian supplement
    "𑜼", "𑜽", "𑜾",  # Ahom
    "𑥄", "𑥆",  # Dives Akuru
    "𑨿", "𑩀", "𑩁", "𑩂", "𑩃", "𑩄", "𑩅", "𑩆",  # Zanabazar
    "𑪚", "𑪛", "𑪜", "𑪞", "𑪟", "𑪠", "𑪡", "𑪢",  # Soyombo
    "𑱁", "𑱂",  # Bhaiksuki
    "𑱰", "𑱱",  # Marchen
    "𑻷", "𑻸",  # Makasar
    "𑿿",  # Tamil
    "𒑱", "𒑲", "𒑳", "𒑴",  # Cuneiform
    "𖩮", "𖩯",  # Mro
    "𖫵",  # Bassa Vah
    "𖬷", "𖬸", "𖬹", "𖭄",  # Pahawh Hmong
    "𖺗", "𖺘", "𖺙", "𖺚",  # Medefaidrin
    "𛲟",  # Duployan
    "𝪇", "𝪈", "𝪉", "𝪊",  # SignWriting
    "𞥞", "𞥟",  # Adlam
)