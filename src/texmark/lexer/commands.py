"""Command classifier: backslash names to tokens.

One static table maps every supported command name to the token the lexer
emits for it. Lookup is a pure function: the same name always yields the same
(immutable) token, and names outside the table still classify deterministically.

Adding a command is a one-line entry in the matching group below.

Thread Safety:
COMMANDS is a read-only mapping built at import time. Safe to share.

"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from texmark.attributes import Accent, DisplayStyle, Variant
from texmark.tokens import Token, TokenType

# =============================================================================
# Literal groups
# =============================================================================

GREEK_LOWER: dict[str, str] = {
    "alpha": "α",
    "beta": "β",
    "gamma": "γ",
    "delta": "δ",
    "epsilon": "ϵ",
    "varepsilon": "ε",
    "zeta": "ζ",
    "eta": "η",
    "theta": "θ",
    "vartheta": "ϑ",
    "iota": "ι",
    "kappa": "κ",
    "varkappa": "ϰ",
    "lambda": "λ",
    "mu": "μ",
    "nu": "ν",
    "xi": "ξ",
    "omicron": "ο",
    "pi": "π",
    "varpi": "ϖ",
    "rho": "ρ",
    "varrho": "ϱ",
    "sigma": "σ",
    "varsigma": "ς",
    "tau": "τ",
    "upsilon": "υ",
    "phi": "ϕ",
    "varphi": "φ",
    "chi": "χ",
    "psi": "ψ",
    "omega": "ω",
    "imath": "ı",
    "jmath": "ȷ",
}

GREEK_UPPER: dict[str, str] = {
    "Gamma": "Γ",
    "Delta": "Δ",
    "Theta": "Θ",
    "Lambda": "Λ",
    "Xi": "Ξ",
    "Pi": "Π",
    "Sigma": "Σ",
    "Upsilon": "Υ",
    "Phi": "Φ",
    "Psi": "Ψ",
    "Omega": "Ω",
}

# Letter-like symbols, rendered upright
SYMBOLS: dict[str, str] = {
    "infty": "∞",
    "aleph": "ℵ",
    "beth": "ℶ",
    "gimel": "ℷ",
    "daleth": "ℸ",
    "hbar": "ℏ",
    "hslash": "ℏ",
    "ell": "ℓ",
    "wp": "℘",
    "Re": "ℜ",
    "Im": "ℑ",
    "emptyset": "∅",
    "varnothing": "∅",
    "angle": "∠",
    "measuredangle": "∡",
    "Box": "□",
    "square": "□",
    "triangle": "△",
    "dagger": "†",
    "ddagger": "‡",
    "prime": "′",
    "top": "⊤",
    "bot": "⊥",
    "clubsuit": "♣",
    "diamondsuit": "♢",
    "heartsuit": "♡",
    "spadesuit": "♠",
    "flat": "♭",
    "natural": "♮",
    "sharp": "♯",
}

OPERATORS: dict[str, str] = {
    # Logic and calculus
    "partial": "∂",
    "nabla": "∇",
    "forall": "∀",
    "exists": "∃",
    "nexists": "∄",
    "neg": "¬",
    "lnot": "¬",
    "colon": ":",
    # Binary operations
    "times": "×",
    "div": "÷",
    "cdot": "⋅",
    "pm": "±",
    "mp": "∓",
    "ast": "∗",
    "star": "⋆",
    "circ": "∘",
    "bullet": "∙",
    "oplus": "⊕",
    "ominus": "⊖",
    "otimes": "⊗",
    "oslash": "⊘",
    "odot": "⊙",
    "cap": "∩",
    "cup": "∪",
    "sqcap": "⊓",
    "sqcup": "⊔",
    "uplus": "⊎",
    "wedge": "∧",
    "land": "∧",
    "vee": "∨",
    "lor": "∨",
    "setminus": "∖",
    "wr": "≀",
    "diamond": "⋄",
    "amalg": "⨿",
    # Relations
    "leq": "≤",
    "le": "≤",
    "geq": "≥",
    "ge": "≥",
    "neq": "≠",
    "ne": "≠",
    "equiv": "≡",
    "approx": "≈",
    "sim": "∼",
    "simeq": "≃",
    "cong": "≅",
    "propto": "∝",
    "ll": "≪",
    "gg": "≫",
    "prec": "≺",
    "succ": "≻",
    "preceq": "⪯",
    "succeq": "⪰",
    "in": "∈",
    "notin": "∉",
    "ni": "∋",
    "subset": "⊂",
    "supset": "⊃",
    "subseteq": "⊆",
    "supseteq": "⊇",
    "sqsubset": "⊏",
    "sqsupset": "⊐",
    "sqsubseteq": "⊑",
    "sqsupseteq": "⊒",
    "perp": "⊥",
    "parallel": "∥",
    "mid": "∣",
    "nmid": "∤",
    "vdash": "⊢",
    "dashv": "⊣",
    "models": "⊨",
    "doteq": "≐",
    "asymp": "≍",
    "bowtie": "⋈",
    "coloneqq": "≔",
    # Arrows
    "to": "→",
    "rightarrow": "→",
    "gets": "←",
    "leftarrow": "←",
    "leftrightarrow": "↔",
    "Rightarrow": "⇒",
    "Leftarrow": "⇐",
    "Leftrightarrow": "⇔",
    "implies": "⟹",
    "impliedby": "⟸",
    "iff": "⟺",
    "longrightarrow": "⟶",
    "longleftarrow": "⟵",
    "longleftrightarrow": "⟷",
    "Longrightarrow": "⟹",
    "Longleftarrow": "⟸",
    "Longleftrightarrow": "⟺",
    "mapsto": "↦",
    "longmapsto": "⟼",
    "uparrow": "↑",
    "downarrow": "↓",
    "updownarrow": "↕",
    "Uparrow": "⇑",
    "Downarrow": "⇓",
    "Updownarrow": "⇕",
    "nearrow": "↗",
    "searrow": "↘",
    "swarrow": "↙",
    "nwarrow": "↖",
    "hookrightarrow": "↪",
    "hookleftarrow": "↩",
    "rightleftharpoons": "⇌",
    # Dots
    "cdots": "⋯",
    "ldots": "…",
    "dots": "…",
    "vdots": "⋮",
    "ddots": "⋱",
}

PARENS: dict[str, str] = {
    "{": "{",
    "}": "}",
    "|": "‖",
    "lbrace": "{",
    "rbrace": "}",
    "lbrack": "[",
    "rbrack": "]",
    "langle": "⟨",
    "rangle": "⟩",
    "lfloor": "⌊",
    "rfloor": "⌋",
    "lceil": "⌈",
    "rceil": "⌉",
    "vert": "|",
    "lvert": "|",
    "rvert": "|",
    "Vert": "‖",
    "lVert": "‖",
    "rVert": "‖",
}

SPACES: dict[str, float] = {
    "!": -0.1667,
    ",": 0.1667,
    ":": 0.2222,
    ">": 0.2222,
    ";": 0.2778,
    " ": 1.0,
    "quad": 1.0,
    "qquad": 2.0,
}

FUNCTIONS: tuple[str, ...] = (
    "sin", "cos", "tan", "cot", "sec", "csc",
    "arcsin", "arccos", "arctan",
    "sinh", "cosh", "tanh", "coth",
    "exp", "log", "ln", "lg",
    "ker", "dim", "deg", "arg", "hom", "erf",
)

# Functions that take their limit annotation underneath
LIMITS: dict[str, str] = {
    "lim": "lim",
    "limsup": "lim sup",
    "liminf": "lim inf",
    "max": "max",
    "min": "min",
    "sup": "sup",
    "inf": "inf",
    "det": "det",
    "gcd": "gcd",
    "Pr": "Pr",
}

BIG_OPERATORS: dict[str, str] = {
    "sum": "∑",
    "prod": "∏",
    "coprod": "∐",
    "bigcup": "⋃",
    "bigcap": "⋂",
    "bigoplus": "⨁",
    "bigotimes": "⨂",
    "bigodot": "⨀",
    "biguplus": "⨄",
    "bigvee": "⋁",
    "bigwedge": "⋀",
    "bigsqcup": "⨆",
}

INTEGRALS: dict[str, str] = {
    "int": "∫",
    "iint": "∬",
    "iiint": "∭",
    "iiiint": "⨌",
    "oint": "∮",
    "oiint": "∯",
    "oiiint": "∰",
}

# =============================================================================
# Command groups
# =============================================================================

OVER_ACCENTS: dict[str, tuple[str, Accent]] = {
    "hat": ("^", Accent.TRUE),
    "widehat": ("^", Accent.TRUE),
    "check": ("ˇ", Accent.TRUE),
    "tilde": ("~", Accent.TRUE),
    "widetilde": ("~", Accent.TRUE),
    "acute": ("´", Accent.TRUE),
    "grave": ("`", Accent.TRUE),
    "dot": ("˙", Accent.TRUE),
    "ddot": ("¨", Accent.TRUE),
    "breve": ("˘", Accent.TRUE),
    "mathring": ("˚", Accent.TRUE),
    "bar": ("¯", Accent.TRUE),
    "vec": ("→", Accent.TRUE),
    "overline": ("‾", Accent.TRUE),
    "overrightarrow": ("→", Accent.FALSE),
    "overleftarrow": ("←", Accent.FALSE),
}

UNDER_ACCENTS: dict[str, tuple[str, Accent]] = {
    "underline": ("_", Accent.TRUE),
    "underrightarrow": ("→", Accent.FALSE),
    "underleftarrow": ("←", Accent.FALSE),
}

OVER_BRACES: dict[str, str] = {
    "overbrace": "⏞",
    "overparen": "⏜",
    "overbracket": "⎴",
}

UNDER_BRACES: dict[str, str] = {
    "underbrace": "⏟",
    "underparen": "⏝",
    "underbracket": "⎵",
}

STYLES: dict[str, Variant] = {
    "mathrm": Variant.NORMAL,
    "mathit": Variant.ITALIC,
    "mathbf": Variant.BOLD,
    "bm": Variant.BOLD_ITALIC,
    "boldsymbol": Variant.BOLD_ITALIC,
    "mathbb": Variant.DOUBLE_STRUCK,
    "mathfrak": Variant.FRAKTUR,
    "mathscr": Variant.SCRIPT,
    "mathcal": Variant.SCRIPT,
    "mathsf": Variant.SANS_SERIF,
    "mathtt": Variant.MONOSPACE,
    "texttt": Variant.MONOSPACE,
}

BINOMIALS: dict[str, DisplayStyle | None] = {
    "binom": None,
    "tbinom": DisplayStyle.INLINE,
    "dbinom": DisplayStyle.BLOCK,
}

DELIMITER_SIZES: dict[str, str] = {
    "big": "1.2em",
    "Big": "1.623em",
    "bigg": "2.047em",
    "Bigg": "2.470em",
}

STRUCTURAL: dict[str, TokenType] = {
    "sqrt": TokenType.SQRT,
    "frac": TokenType.FRAC,
    "left": TokenType.LEFT,
    "right": TokenType.RIGHT,
    "middle": TokenType.MIDDLE,
    "begin": TokenType.BEGIN,
    "end": TokenType.END,
    "\\": TokenType.NEWLINE,
    "overset": TokenType.OVERSET,
    "underset": TokenType.UNDERSET,
    "slashed": TokenType.SLASHED,
    "text": TokenType.TEXT,
    "operatorname": TokenType.OPERATOR_NAME,
}


def _build_table() -> Mapping[str, Token]:
    """Assemble the command table; a name listed twice is a programming error."""
    entries: list[tuple[str, Token]] = []
    entries += [(k, Token(TokenType.LETTER, v, Variant.ITALIC)) for k, v in GREEK_LOWER.items()]
    entries += [(k, Token(TokenType.LETTER, v, Variant.NORMAL)) for k, v in GREEK_UPPER.items()]
    entries += [(k, Token(TokenType.LETTER, v, Variant.NORMAL)) for k, v in SYMBOLS.items()]
    entries += [(k, Token(TokenType.OPERATOR, v)) for k, v in OPERATORS.items()]
    entries += [(k, Token(TokenType.PAREN, v)) for k, v in PARENS.items()]
    entries += [(k, Token(TokenType.SPACE, space=v)) for k, v in SPACES.items()]
    entries += [(k, Token(TokenType.FUNCTION, k)) for k in FUNCTIONS]
    entries += [(k, Token(TokenType.LIM, v)) for k, v in LIMITS.items()]
    entries += [(k, Token(TokenType.BIG_OP, v)) for k, v in BIG_OPERATORS.items()]
    entries += [(k, Token(TokenType.INTEGRAL, v)) for k, v in INTEGRALS.items()]
    entries += [(k, Token(TokenType.OVER, g, accent=a)) for k, (g, a) in OVER_ACCENTS.items()]
    entries += [(k, Token(TokenType.UNDER, g, accent=a)) for k, (g, a) in UNDER_ACCENTS.items()]
    entries += [(k, Token(TokenType.OVERBRACE, v)) for k, v in OVER_BRACES.items()]
    entries += [(k, Token(TokenType.UNDERBRACE, v)) for k, v in UNDER_BRACES.items()]
    entries += [(k, Token(TokenType.STYLE, variant=v)) for k, v in STYLES.items()]
    entries += [(k, Token(TokenType.BINOM, display=v)) for k, v in BINOMIALS.items()]
    for name, size in DELIMITER_SIZES.items():
        for suffix in ("", "l", "r", "m"):
            entries.append((name + suffix, Token(TokenType.BIG, size)))
    entries += [(k, Token(v)) for k, v in STRUCTURAL.items()]

    table: dict[str, Token] = {}
    for name, token in entries:
        if name in table:
            msg = f"command {name!r} is defined twice"
            raise ValueError(msg)
        table[name] = token
    return MappingProxyType(table)


COMMANDS: Mapping[str, Token] = _build_table()


def classify_command(name: str) -> Token:
    """Classify a command name (the text after the backslash).

    Args:
        name: A run of ASCII letters, or a single non-letter character

    Returns:
        The command's token. Unknown single characters become upright
        letters (``\\#`` renders as ``#``); unknown multi-letter names
        become UNDEFINED tokens so the parser can surface them.

    Example:
        >>> classify_command("alpha")
        Token(LETTER, 'α', italic)
        >>> classify_command("foo")
        Token(UNDEFINED, 'foo')
    """
    token = COMMANDS.get(name)
    if token is not None:
        return token
    if len(name) == 1:
        return Token(TokenType.LETTER, name, Variant.NORMAL)
    return Token(TokenType.UNDEFINED, name)
