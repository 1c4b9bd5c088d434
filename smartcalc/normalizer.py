import re

# each pass runs exactly once, in this order; the result is not iterated to a fixed point
SIGN_PASSES = [
    (re.compile(r"--"), "+"),
    (re.compile(r"\++"), "+"),
    (re.compile(r"(\+-|-+)"), "-"),
]

SPACED_TOKEN_RE = re.compile(r"(-?\d+|[-+*/()])", re.ASCII)
WHITESPACE_RE = re.compile(r"\s+")


def normalize(line: str) -> str:
    """Collapses sign runs and puts single spaces around numbers, operators and parentheses.

    "2 -- 2" => "2 + 2", "3 +++ -4" => "3 + -4", "(1+a)*-2" => "( 1 + a ) * -2"

    Sign runs are only collapsed as far as the three passes reach: "5 --- 3" => "5 - 3", but
    "5 -+- 3" => "5 - - 3" and spaced signs like "- - -" are left as separate tokens.
    """
    for pattern, replacement in SIGN_PASSES:
        line = pattern.sub(replacement, line)
    line = SPACED_TOKEN_RE.sub(r" \1 ", line)
    return WHITESPACE_RE.sub(" ", line).strip()
