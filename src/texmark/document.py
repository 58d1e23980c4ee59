"""Formula splicing for host documents.

Finds ``$$...$$`` (block) and ``$...$`` (inline) spans in surrounding text,
converts each one, and splices the markup back in place. Text outside the
spans is left untouched.

The only dollar signs allowed in a host document are formula delimiters;
write ``&dollar;`` for a literal dollar in HTML.

Thread Safety:
replace() is pure. convert_html() touches the file system and should not be
run concurrently on the same files.

"""

from __future__ import annotations

from pathlib import Path

from texmark.attributes import DisplayStyle
from texmark.errors import InvalidDelimiterCountError, LatexError
from texmark.utils.logger import get_logger

logger = get_logger(__name__)

BLOCK_DELIMITER = "$$"
INLINE_DELIMITER = "$"
HTML_SUFFIX = ".html"


def _replace_spans(text: str, delimiter: str, display: DisplayStyle) -> str:
    from texmark import convert

    parts = text.split(delimiter)
    count = len(parts) - 1
    if count % 2:
        raise InvalidDelimiterCountError(delimiter, count)
    for i in range(1, len(parts), 2):
        parts[i] = convert(parts[i], display)
    return "".join(parts)


def replace(text: str) -> str:
    """Convert every formula span in ``text`` to MathML.

    ``$$`` spans are converted first so a block delimiter is never read as
    two inline ones.

    Args:
        text: Host document text

    Returns:
        The text with each span replaced by a ``<math>`` element

    Raises:
        InvalidDelimiterCountError: An odd number of ``$$`` or ``$``
        LatexError: A formula failed to convert

    Example:
        >>> replace("Energy $E$.")
        'Energy <math xmlns="http://www.w3.org/1998/Math/MathML" display="inline"><mi>E</mi></math>.'
    """
    text = _replace_spans(text, BLOCK_DELIMITER, DisplayStyle.BLOCK)
    return _replace_spans(text, INLINE_DELIMITER, DisplayStyle.INLINE)


def convert_html(path: str | Path) -> list[Path]:
    """Convert formulas in an HTML file, or in every HTML file under a directory.

    Only files ending in ``.html`` are touched. A file is rewritten only when
    its content changes; a file whose formulas fail to convert is logged and
    left as it was, and the walk continues. The same holds for a file that
    cannot be read or is not valid UTF-8.

    Args:
        path: A file or a directory (walked recursively)

    Returns:
        Paths of the files that were rewritten
    """
    root = Path(path)
    if root.is_dir():
        candidates = sorted(p for p in root.rglob(f"*{HTML_SUFFIX}") if p.is_file())
    elif root.is_file() and root.suffix == HTML_SUFFIX:
        candidates = [root]
    else:
        candidates = []

    rewritten: list[Path] = []
    for file in candidates:
        try:
            original = file.read_text(encoding="utf-8")
            converted = replace(original)
        except (LatexError, OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to convert %s: %s", file, e)
            continue
        if converted != original:
            file.write_text(converted, encoding="utf-8")
            logger.info("Converted formulas in %s", file)
            rewritten.append(file)
    return rewritten
