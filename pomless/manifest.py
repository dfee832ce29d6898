"""
pomless.manifest - OSGi bundle manifest reader

Reads the main section of a JAR manifest (META-INF/MANIFEST.MF):

    Manifest-Version: 1.0
    Bundle-SymbolicName: org.example.core;singleton:=true
    Bundle-Version: 1.2.0.qualifier
    Bundle-Name: %bundleName
    Require-Bundle: org.eclipse.core.runtime,
     org.eclipse.ui

A line starting with a single space continues the previous header. The
main section ends at the first blank line; named entry sections after it
are ignored.
"""

from pathlib import Path
from typing import Iterator, Optional

from pomless.errors import MalformedDescriptor, MissingRequiredField

BUNDLE_SYMBOLIC_NAME = "Bundle-SymbolicName"
BUNDLE_VERSION = "Bundle-Version"
BUNDLE_NAME = "Bundle-Name"
BUNDLE_VENDOR = "Bundle-Vendor"
BUNDLE_LOCALIZATION = "Bundle-Localization"


class ManifestHeaders:
    """Manifest main attributes. Header names compare case-insensitively."""

    def __init__(self, path: Path):
        self.path = path
        self._headers: dict[str, tuple[str, str]] = {}

    def __setitem__(self, name: str, value: str) -> None:
        self._headers[name.lower()] = (name, value)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._headers

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._headers.values())

    def __len__(self) -> int:
        return len(self._headers)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        entry = self._headers.get(name.lower())
        return entry[1] if entry is not None else default

    def require(self, name: str) -> str:
        """
        Return a header value, raising MissingRequiredField if it is absent or empty.
        """
        value = self.get(name)
        if value is None or not value.strip():
            raise MissingRequiredField(
                name, self.path, f"Required header {name} missing in {self.path}"
            )
        return value.strip()


def parse_manifest(content: str, path: Path) -> ManifestHeaders:
    """
    Parse manifest text into its main-section headers.

    Raises:
        MalformedDescriptor: If a line is neither a header nor a continuation.
    """
    headers = ManifestHeaders(path)
    current_name: Optional[str] = None
    current_value: list[str] = []

    lines = content.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    for lineno, line in enumerate(lines, start=1):
        if not line:
            # End of the main section
            break

        if line.startswith(" "):
            if current_name is None:
                raise MalformedDescriptor(
                    "continuation line without a header", path, line=lineno
                )
            current_value.append(line[1:])
            continue

        if current_name is not None:
            headers[current_name] = "".join(current_value)

        name, sep, value = line.partition(":")
        if not sep or not name or " " in name:
            raise MalformedDescriptor(f"invalid header line {line!r}", path, line=lineno)
        if value.startswith(" "):
            value = value[1:]
        current_name = name
        current_value = [value]

    if current_name is not None:
        headers[current_name] = "".join(current_value)

    return headers


def read_manifest(path: Path) -> ManifestHeaders:
    """
    Read and parse a manifest file.

    Raises:
        MalformedDescriptor: If the file is not valid UTF-8 or not a manifest.
    """
    with open(path, "rb") as f:
        raw = f.read()

    try:
        content = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        line = raw.count(b"\n", 0, e.start) + 1
        raise MalformedDescriptor(str(e), path, line=line) from e
    return parse_manifest(content, path)


def bundle_symbolic_name(headers: ManifestHeaders) -> str:
    """
    The bare Bundle-SymbolicName, with directives and attributes dropped.

    Example:
        "org.example.core;singleton:=true" -> "org.example.core"
    """
    symbolic_name = headers.require(BUNDLE_SYMBOLIC_NAME)
    bare = symbolic_name.split(";", 1)[0].strip()
    if not bare:
        raise MissingRequiredField(
            BUNDLE_SYMBOLIC_NAME,
            headers.path,
            f"Required header {BUNDLE_SYMBOLIC_NAME} missing in {headers.path}",
        )
    return bare
