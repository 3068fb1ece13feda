"""
Identifier Extractor
Parses .strings resource contents into the ordered list of string
identifiers. An identifier line looks like

    "greeting.title" = "Hello";

and only the text between the first two quotes is the identifier; the value
and trailing punctuation are opaque.
"""
from errors import MalformedIdentifierLine

DOUBLE_QUOTE = '"'


def is_identifier_line(line: str) -> bool:
    return line.strip().startswith(DOUBLE_QUOTE)


def extract_identifier_from_trimmed_line(line: str) -> str:
    """Return the text strictly between the first and second quote.

    `line` must already be stripped and start with a quote.
    """
    end = line.find(DOUBLE_QUOTE, 1)
    if end == -1:
        raise MalformedIdentifierLine(line)
    return line[1:end]


def extract_identifiers(contents: str, path: str = None) -> list:
    """
    Args:
        contents: full text of a resource file
        path: used only to locate errors

    Returns:
        identifiers in file order. Duplicates are kept.

    Raises:
        MalformedIdentifierLine: an identifier line has no closing quote
    """
    identifiers = []
    for number, raw in enumerate(contents.split("\n"), start=1):
        line = raw.strip()
        if not line.startswith(DOUBLE_QUOTE):
            continue
        try:
            identifiers.append(extract_identifier_from_trimmed_line(line))
        except MalformedIdentifierLine as e:
            raise MalformedIdentifierLine(line, path=path, line_number=number) from e
    return identifiers
