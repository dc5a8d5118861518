"""Rendering of secret payloads into printable lines.

Each displayed secret becomes a header line with its name, one indented
line per data key and a blank separator line. Building the lines is
delegated to an OutputStyle so the text content stays the same whether
or not it is colorized.
"""

from typing import NamedTuple, Protocol

from icecream import ic
from rich.text import Text

from kube_secrets.models import SecretRecord

UNDECODABLE_VALUE = "<unable to decode UTF-8>"


class OutputStyle(Protocol):
    """Builds the header and entry lines of a rendered secret."""

    def header(self, name: str) -> str | Text: ...

    def entry(self, key: str, value: str) -> str | Text: ...


class PlainStyle:
    """Builds unstyled text lines."""

    def header(self, name: str) -> str:
        return f"{name}:"

    def entry(self, key: str, value: str) -> str:
        return f"  {key}: {value}"


class RichStyle:
    """Builds Rich Text lines with the secret name and keys colored.

    Secret contents are never parsed as markup, so they are printed
    exactly as decoded.
    """

    def __init__(self, name_style: str = "secret.name", key_style: str = "secret.key") -> None:
        self.name_style = name_style
        self.key_style = key_style

    def header(self, name: str) -> Text:
        return Text.assemble((name, self.name_style), ":")

    def entry(self, key: str, value: str) -> Text:
        return Text.assemble("  ", (key, self.key_style), ": ", value)


class RenderedSecret(NamedTuple):
    """Printable lines for one secret.

    Attributes:
        lines: Header, key lines and the trailing blank line.
        entries: Number of key lines.

    """

    lines: list[str | Text]
    entries: int


def decode_value(key: str, raw: bytes) -> str:
    """Decode a secret value as UTF-8, falling back to a placeholder.

    Args:
        key: The data key, used for debug output only.
        raw: The raw value.

    Returns:
        The decoded text, or UNDECODABLE_VALUE if it is not valid UTF-8.

    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as err:
        ic(key, err)
        return UNDECODABLE_VALUE


def render_secret(secret: SecretRecord, style: OutputStyle | None = None) -> RenderedSecret:
    """Render a secret into printable lines.

    Keys are rendered in the order of the secret's data mapping. A value
    that is not valid UTF-8 only affects its own line.

    Args:
        secret: The secret to render.
        style: Styling strategy, plain text if omitted.

    Returns:
        The rendered lines and the number of key lines.

    """
    style = style or PlainStyle()
    lines: list[str | Text] = [style.header(secret.name)]

    for key, raw in secret.data.items():
        lines.append(style.entry(key, decode_value(key, raw)))

    lines.append("")
    return RenderedSecret(lines=lines, entries=len(secret.data))
