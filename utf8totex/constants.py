"""Translation tables used across the utf8totex package."""

from __future__ import annotations

from .models import Environment

DEFAULT_ENVIRONMENT = Environment.TEXT

# Accent characters after which legacy TeX keeps the dot on a plain i/j.
DOTLESS_ACCENTS = frozenset("\"'.=^`~Hrtuv")

# Fuzzy-mode characters that open a passthrough region.
MACRO_START = "\\"
GROUP_OPEN = "{"
GROUP_CLOSE = "}"
MATH_SHIFT = "$"

# Control characters that may appear in ordinary text.
ASCII_WHITESPACE = frozenset("\t\n\r")

TEXT_ASCII_ESCAPES = {
    "#": "\\#",
    "$": "\\$",
    "%": "\\%",
    "&": "\\&",
    "_": "\\_",
    "{": "\\{",
    "}": "\\}",
    "\\": "{\\textbackslash}",
    "~": "{\\textasciitilde}",
    "^": "{\\textasciicircum}",
}

MATH_ASCII_ESCAPES = {
    "#": "\\#",
    "$": "\\$",
    "%": "\\%",
    "&": "\\&",
    "_": "\\_",
    "{": "\\{",
    "}": "\\}",
    "\\": "{\\backslash}",
    "~": "{\\sim}",
    "^": "{\\hat{}}",
}

# Combining marks. Letter-named accents end in a space so the base is not
# absorbed into the control word.
TEXT_ACCENTS = {
    0x0300: "{\\`",
    0x0301: "{\\'",
    0x0302: "{\\^",
    0x0303: "{\\~",
    0x0304: "{\\=",
    0x0306: "{\\u ",
    0x0307: "{\\.",
    0x0308: '{\\"',
    0x030A: "{\\r ",
    0x030B: "{\\H ",
    0x030C: "{\\v ",
    0x0323: "{\\d ",
    0x0327: "{\\c ",
    0x0328: "{\\k ",
    0x0331: "{\\b ",
    0x0361: "{\\t ",
}

MATH_ACCENTS = {
    0x0300: "\\grave{",
    0x0301: "\\acute{",
    0x0302: "\\hat{",
    0x0303: "\\tilde{",
    0x0304: "\\bar{",
    0x0306: "\\breve{",
    0x0307: "\\dot{",
    0x0308: "\\ddot{",
    0x030C: "\\check{",
    0x20D7: "\\vec{",
}

TEXT_SYMBOLS = {
    # Latin-1 supplement
    0x00A0: "~",
    0x00A1: "!`",
    0x00A2: "{\\textcent}",
    0x00A3: "{\\pounds}",
    0x00A4: "{\\textcurrency}",
    0x00A5: "{\\textyen}",
    0x00A6: "{\\textbrokenbar}",
    0x00A7: "{\\S}",
    0x00A9: "{\\copyright}",
    0x00AA: "{\\textordfeminine}",
    0x00AB: "{\\guillemotleft}",
    0x00AC: "{\\textlnot}",
    0x00AD: "\\-",
    0x00AE: "{\\textregistered}",
    0x00B0: "{\\textdegree}",
    0x00B1: "{\\textpm}",
    0x00B2: "{\\texttwosuperior}",
    0x00B3: "{\\textthreesuperior}",
    0x00B5: "{\\textmu}",
    0x00B6: "{\\P}",
    0x00B7: "{\\textperiodcentered}",
    0x00B9: "{\\textonesuperior}",
    0x00BA: "{\\textordmasculine}",
    0x00BB: "{\\guillemotright}",
    0x00BC: "{\\textonequarter}",
    0x00BD: "{\\textonehalf}",
    0x00BE: "{\\textthreequarters}",
    0x00BF: "?`",
    0x00C6: "{\\AE}",
    0x00D0: "{\\DH}",
    0x00D7: "{\\texttimes}",
    0x00D8: "{\\O}",
    0x00DE: "{\\TH}",
    0x00DF: "{\\ss}",
    0x00E6: "{\\ae}",
    0x00F0: "{\\dh}",
    0x00F7: "{\\textdiv}",
    0x00F8: "{\\o}",
    0x00FE: "{\\th}",
    # Latin extended letters without a decomposition
    0x0110: "{\\DJ}",
    0x0111: "{\\dj}",
    0x0131: "{\\i}",
    0x0141: "{\\L}",
    0x0142: "{\\l}",
    0x014A: "{\\NG}",
    0x014B: "{\\ng}",
    0x0152: "{\\OE}",
    0x0153: "{\\oe}",
    0x0237: "{\\j}",
    # General punctuation
    0x2002: "\\enspace{}",
    0x2003: "\\quad{}",
    0x2009: "\\,",
    0x2013: "--",
    0x2014: "---",
    0x2018: "`",
    0x2019: "'",
    0x201A: "{\\quotesinglbase}",
    0x201C: "``",
    0x201D: "''",
    0x201E: "{\\quotedblbase}",
    0x2020: "{\\dag}",
    0x2021: "{\\ddag}",
    0x2022: "{\\textbullet}",
    0x2026: "{\\ldots}",
    0x2030: "{\\textperthousand}",
    0x2039: "{\\guilsinglleft}",
    0x203A: "{\\guilsinglright}",
    0x20AC: "{\\texteuro}",
    0x2122: "{\\texttrademark}",
}

_GREEK_LOWER = {
    0x03B1: "alpha",
    0x03B2: "beta",
    0x03B3: "gamma",
    0x03B4: "delta",
    0x03B5: "varepsilon",
    0x03B6: "zeta",
    0x03B7: "eta",
    0x03B8: "theta",
    0x03B9: "iota",
    0x03BA: "kappa",
    0x03BB: "lambda",
    0x03BC: "mu",
    0x03BD: "nu",
    0x03BE: "xi",
    0x03C0: "pi",
    0x03C1: "rho",
    0x03C2: "varsigma",
    0x03C3: "sigma",
    0x03C4: "tau",
    0x03C5: "upsilon",
    0x03C6: "varphi",
    0x03C7: "chi",
    0x03C8: "psi",
    0x03C9: "omega",
    0x03D1: "vartheta",
    0x03D5: "phi",
    0x03D6: "varpi",
    0x03F1: "varrho",
    0x03F5: "epsilon",
}

_GREEK_UPPER = {
    0x0393: "Gamma",
    0x0394: "Delta",
    0x0398: "Theta",
    0x039B: "Lambda",
    0x039E: "Xi",
    0x03A0: "Pi",
    0x03A3: "Sigma",
    0x03A5: "Upsilon",
    0x03A6: "Phi",
    0x03A8: "Psi",
    0x03A9: "Omega",
}

# Greek capitals that are indistinguishable from Latin letters.
_GREEK_LATIN_LOOKALIKES = {
    0x0391: "A",
    0x0392: "B",
    0x0395: "E",
    0x0396: "Z",
    0x0397: "H",
    0x0399: "I",
    0x039A: "K",
    0x039C: "M",
    0x039D: "N",
    0x039F: "O",
    0x03A1: "P",
    0x03A4: "T",
    0x03A7: "X",
    0x03BF: "o",
}

_MATH_OPERATORS = {
    0x00A0: "~",
    0x00AC: "neg",
    0x00B1: "pm",
    0x00B5: "mu",
    0x00B7: "cdot",
    0x00D7: "times",
    0x00F7: "div",
    0x2026: "ldots",
    0x2032: "prime",
    0x210F: "hbar",
    0x2113: "ell",
    0x2135: "aleph",
    0x2190: "leftarrow",
    0x2191: "uparrow",
    0x2192: "rightarrow",
    0x2193: "downarrow",
    0x2194: "leftrightarrow",
    0x21A6: "mapsto",
    0x21D0: "Leftarrow",
    0x21D2: "Rightarrow",
    0x21D4: "Leftrightarrow",
    0x2200: "forall",
    0x2202: "partial",
    0x2203: "exists",
    0x2204: "nexists",
    0x2205: "emptyset",
    0x2207: "nabla",
    0x2208: "in",
    0x2209: "notin",
    0x220B: "ni",
    0x220F: "prod",
    0x2211: "sum",
    0x2212: "-",
    0x2216: "setminus",
    0x2217: "ast",
    0x2218: "circ",
    0x221A: "surd",
    0x221D: "propto",
    0x221E: "infty",
    0x2225: "parallel",
    0x2227: "wedge",
    0x2228: "vee",
    0x2229: "cap",
    0x222A: "cup",
    0x222B: "int",
    0x222E: "oint",
    0x223C: "sim",
    0x2243: "simeq",
    0x2248: "approx",
    0x2260: "neq",
    0x2261: "equiv",
    0x2264: "leq",
    0x2265: "geq",
    0x2282: "subset",
    0x2283: "supset",
    0x2286: "subseteq",
    0x2287: "supseteq",
    0x2295: "oplus",
    0x2297: "otimes",
    0x22A5: "perp",
    0x22C5: "cdot",
    0x22EF: "cdots",
    0x27E8: "langle",
    0x27E9: "rangle",
}


def _macro(name: str) -> str:
    if not name.isalpha():
        return name
    return f"{{\\{name}}}"


MATH_SYMBOLS = {
    **{codepoint: _macro(name) for codepoint, name in _GREEK_LOWER.items()},
    **{codepoint: _macro(name) for codepoint, name in _GREEK_UPPER.items()},
    **_GREEK_LATIN_LOOKALIKES,
    **{codepoint: _macro(name) for codepoint, name in _MATH_OPERATORS.items()},
    0x00B0: "{^\\circ}",
}

ASCII_ESCAPES = {
    Environment.TEXT: TEXT_ASCII_ESCAPES,
    Environment.MATH: MATH_ASCII_ESCAPES,
}

ACCENTS = {
    Environment.TEXT: TEXT_ACCENTS,
    Environment.MATH: MATH_ACCENTS,
}

SYMBOLS = {
    Environment.TEXT: TEXT_SYMBOLS,
    Environment.MATH: MATH_SYMBOLS,
}
