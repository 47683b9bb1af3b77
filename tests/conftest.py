"""Pytest fixtures for sol-metadata tests."""

import pytest


@pytest.fixture
def sample_metadata_xml():
    """A realistic metadata.xml document as shipped inside a .eopkg."""
    return """<PISI>
    <Source>
        <Name>nano</Name>
        <Homepage>https://www.nano-editor.org</Homepage>
        <Packager>
            <Name>Example Packager</Name>
            <Email>packager@example.com</Email>
        </Packager>
    </Source>
    <Package>
        <Name>nano</Name>
        <Summary xml:lang="en">Small, friendly text editor</Summary>
        <PartOf>system.editor</PartOf>
        <License>GPL-3.0-or-later</License>
        <History>
            <Update release="12">
                <Date>2024-01-15</Date>
                <Version>7.2</Version>
                <Name>Example Packager</Name>
                <Email>packager@example.com</Email>
            </Update>
        </History>
    </Package>
</PISI>
"""


@pytest.fixture
def sample_metadata_file(tmp_path, sample_metadata_xml):
    """Write the sample metadata.xml to disk."""
    path = tmp_path / "metadata.xml"
    path.write_text(sample_metadata_xml)
    return path


@pytest.fixture
def write_xml(tmp_path):
    """Factory that writes an XML document to a named file under tmp_path."""

    def _write(content: str, name: str = "metadata.xml"):
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
