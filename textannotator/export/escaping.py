"""Field escaping for CSV and XML exports."""

from __future__ import annotations

from xml.sax.saxutils import escape, unescape

_XML_QUOTE_ENTITIES = {"'": "&apos;", '"': "&quot;"}
_XML_UNQUOTE_ENTITIES = {v: k for k, v in _XML_QUOTE_ENTITIES.items()}


def escape_csv_cell(value: object) -> str:
    """Escape a value for use as a CSV field.

    The field is wrapped in double quotes only if it contains a comma, a
    double quote or a newline; embedded double quotes are doubled.

    Parameters
    ----------
    value : object
        Field value; converted with ``str``.

    Returns
    -------
    str
        Escaped field.

    Examples
    --------
    >>> escape_csv_cell('He said "hi", ok')
    '"He said ""hi"", ok"'
    >>> escape_csv_cell("ok")
    'ok'
    """
    text = str(value)
    if "," in text or '"' in text or "\n" in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def escape_xml(value: object) -> str:
    """Escape a value for XML character data or attribute values.

    ``&`` is replaced first so existing text is never double-escaped
    within a single pass.

    Parameters
    ----------
    value : object
        Value to escape; converted with ``str``.

    Returns
    -------
    str
        Escaped text.

    Examples
    --------
    >>> escape_xml("<a href='x'>&</a>")
    '&lt;a href=&apos;x&apos;&gt;&amp;&lt;/a&gt;'
    """
    return escape(str(value), _XML_QUOTE_ENTITIES)


def unescape_xml(value: str) -> str:
    """Reverse ``escape_xml``.

    Parameters
    ----------
    value : str
        Escaped text.

    Returns
    -------
    str
        Unescaped text.
    """
    return unescape(value, _XML_UNQUOTE_ENTITIES)
