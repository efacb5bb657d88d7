from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

CONTAINER_XML = """<?xml version="1.0" encoding="UTF-8"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="{full_path}" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""

OPF_XML = """<?xml version="1.0" encoding="UTF-8"?>
<package version="2.0" unique-identifier="BookId" xmlns="http://www.idpf.org/2007/opf">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/" xmlns:opf="http://www.idpf.org/2007/opf">
    <dc:title>Metamorphosis</dc:title>
    <dc:creator opf:role="aut" opf:file-as="Kafka, Franz">Franz Kafka</dc:creator>
    <dc:publisher>PressBooks.com</dc:publisher>
    <dc:language>en</dc:language>
    <dc:identifier id="BookId">urn:uuid:1234</dc:identifier>
    <meta name="cover" content="cover-image"/>
  </metadata>
  <manifest>
    <item id="ncx" href="toc.ncx" media-type="application/x-dtbncx+xml"/>
    <item id="cover-image" href="images/cover.jpg" media-type="image/jpeg"/>
    <item id="ch1" href="chapter1.xhtml" media-type="application/xhtml+xml"/>
    <item id="ch2" href="chapter2.xhtml" media-type="application/xhtml+xml"/>
  </manifest>
  <spine toc="ncx">
    <itemref idref="ch1"/>
    <itemref idref="ch2"/>
  </spine>
</package>
"""

NCX_XML = """<?xml version="1.0" encoding="UTF-8"?>
<ncx xmlns="http://www.daisy.org/z3986/2005/ncx/" version="2005-1">
  <head>
    <meta name="dtb:uid" content="urn:uuid:1234"/>
    <meta name="dtb:depth" content="2"/>
  </head>
  <docTitle><text>Metamorphosis</text></docTitle>
  <navMap>
    <navPoint id="np1" playOrder="1">
      <navLabel><text>Chapter I</text></navLabel>
      <content src="chapter1.xhtml"/>
      <navPoint id="np1-1" playOrder="2">
        <navLabel><text>Part One</text></navLabel>
        <content src="chapter1.xhtml#part1"/>
      </navPoint>
    </navPoint>
    <navPoint id="np2" playOrder="3">
      <navLabel><text>Chapter II</text></navLabel>
      <content src="chapter2.xhtml"/>
    </navPoint>
  </navMap>
</ncx>
"""

CHAPTER_XHTML = """<?xml version="1.0" encoding="utf-8"?>
<html xmlns="http://www.w3.org/1999/xhtml"><head><title>{title}</title></head>
<body><p>{title}</p></body></html>
"""


def build_epub_dir(
    root: Path,
    *,
    container: str | None = None,
    opf: str | None = OPF_XML,
    ncx: str | None = NCX_XML,
    opf_path: str = "OEBPS/content.opf",
) -> Path:
    """Lay out an extracted EPUB under ``root``.

    ``opf=None``, ``ncx=None`` or ``container=""`` leave that file out.
    """
    root.mkdir(parents=True, exist_ok=True)
    (root / "mimetype").write_text("application/epub+zip", encoding="utf-8")

    if container is None:
        container = CONTAINER_XML.format(full_path=opf_path)
    if container:
        (root / "META-INF").mkdir(exist_ok=True)
        (root / "META-INF" / "container.xml").write_text(container, encoding="utf-8")

    content_dir = (root / opf_path).parent
    content_dir.mkdir(parents=True, exist_ok=True)
    if opf is not None:
        (root / opf_path).write_text(opf, encoding="utf-8")
    if ncx is not None:
        (content_dir / "toc.ncx").write_text(ncx, encoding="utf-8")

    (content_dir / "images").mkdir(exist_ok=True)
    (content_dir / "images" / "cover.jpg").write_bytes(b"\xff\xd8\xff")
    for index in (1, 2):
        (content_dir / f"chapter{index}.xhtml").write_text(
            CHAPTER_XHTML.format(title=f"Chapter {index}"), encoding="utf-8"
        )
    return root


def zip_epub_dir(directory: Path, target: Path) -> Path:
    """Package an extracted EPUB directory as an .epub archive."""
    with zipfile.ZipFile(target, "w") as zf:
        zf.write(directory / "mimetype", "mimetype", compress_type=zipfile.ZIP_STORED)
        for path in sorted(directory.rglob("*")):
            if path.is_file() and path.name != "mimetype":
                zf.write(path, path.relative_to(directory).as_posix())
    return target


def deflate_epub_dir(directory: Path, target: Path) -> Path:
    """Package an extracted EPUB with every member deflate-compressed."""
    with zipfile.ZipFile(target, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for path in sorted(directory.rglob("*")):
            if path.is_file():
                zf.write(path, path.relative_to(directory).as_posix())
    return target


def corrupt_member(archive: Path, member: str) -> None:
    """Flip bytes inside the compressed data of ``member``, leaving the directory intact."""
    data = bytearray(archive.read_bytes())
    with zipfile.ZipFile(archive) as zf:
        info = zf.getinfo(member)

    header = info.header_offset
    name_length = int.from_bytes(data[header + 26 : header + 28], "little")
    extra_length = int.from_bytes(data[header + 28 : header + 30], "little")
    start = header + 30 + name_length + extra_length
    end = min(start + info.compress_size, start + 46)
    for i in range(start + 8, end):
        data[i] ^= 0xFF

    archive.write_bytes(bytes(data))


def nested_ncx(depth: int) -> str:
    """NCX whose navPoints are nested ``depth`` levels deep, one per level."""
    opening = "".join(
        f'<navPoint id="level{i}"><navLabel><text>Level {i}</text></navLabel>'
        f'<content src="content{i}.xhtml"/>'
        for i in range(1, depth + 1)
    )
    closing = "</navPoint>" * depth
    return (
        '<ncx xmlns="http://www.daisy.org/z3986/2005/ncx/">'
        "<docTitle><text>Nested</text></docTitle>"
        f"<navMap>{opening}{closing}</navMap></ncx>"
    )


def sibling_ncx(count: int) -> str:
    """NCX with ``count`` top-level navPoints."""
    points = "".join(
        f'<navPoint id="chapter{i}"><navLabel><text>Chapter {i}</text></navLabel>'
        f'<content src="chapter{i}.xhtml"/></navPoint>'
        for i in range(count)
    )
    return (
        '<ncx xmlns="http://www.daisy.org/z3986/2005/ncx/">'
        "<docTitle><text>Siblings</text></docTitle>"
        f"<navMap>{points}</navMap></ncx>"
    )


@pytest.fixture
def epub_dir(tmp_path: Path) -> Path:
    return build_epub_dir(tmp_path / "book")


@pytest.fixture
def epub_file(tmp_path: Path) -> Path:
    directory = build_epub_dir(tmp_path / "source")
    return zip_epub_dir(directory, tmp_path / "Metamorphosis.epub")
