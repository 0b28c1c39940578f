"""Tests for file and URL input sources."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from regionstats.errors import SourceOpenError
from regionstats.extractor import SourceFormat, populate
from regionstats.model import RegionCollection
from regionstats.sources import InputFile, InputSource, InputURL
from regionstats.sources.input_source import _ClosingSource
from tests.conftest import POPDEN_ROWS, json_document

if TYPE_CHECKING:
    from pathlib import Path

STATS_URL = "https://statswales.example/popu1009"


def _client(status_code: int = 200, text: str = "") -> httpx.Client:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=text)

    return httpx.Client(transport=httpx.MockTransport(handler))


class TestInputFile:
    """Tests for InputFile."""

    def test_source_and_open(self, data_dir: Path) -> None:
        """open() returns a readable UTF-8 stream."""
        source = InputFile(data_dir / "areas.csv")

        assert source.source == str(data_dir / "areas.csv")
        with source as stream:
            assert stream.readline().startswith("Local authority code")
        assert stream.closed

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises SourceOpenError (an OSError)."""
        source = InputFile(tmp_path / "missing.csv")

        with pytest.raises(SourceOpenError, match="InputFile.open: Failed to open file"):
            source.open()
        with pytest.raises(OSError):
            source.open()

    def test_satisfies_protocol(self, tmp_path: Path) -> None:
        """Both concrete sources are InputSources."""
        assert isinstance(InputFile(tmp_path / "x.csv"), InputSource)
        assert isinstance(InputURL(STATS_URL), InputSource)


class TestInputURL:
    """Tests for InputURL using httpx.MockTransport."""

    def test_fetch_and_parse(self, json_cols: dict) -> None:
        """The fetched body can be fed straight to a parser."""
        collection = RegionCollection()
        source = InputURL(STATS_URL, client=_client(text=json_document(POPDEN_ROWS)))

        with source as stream:
            assert stream.name == STATS_URL
            count = populate(stream, SourceFormat.WELSH_STATS_JSON, json_cols, collection)

        assert count == 4
        assert "W06000011" in collection

    def test_http_error_status(self) -> None:
        """4xx/5xx responses raise SourceOpenError."""
        source = InputURL(STATS_URL, client=_client(status_code=404))

        with pytest.raises(SourceOpenError, match="InputURL.open: Failed to fetch"):
            source.open()

    def test_transport_error(self) -> None:
        """Connection failures raise SourceOpenError."""

        def handler(request: httpx.Request) -> httpx.Response:
            msg = "connection refused"
            raise httpx.ConnectError(msg, request=request)

        source = InputURL(STATS_URL, client=httpx.Client(transport=httpx.MockTransport(handler)))

        with pytest.raises(SourceOpenError):
            source.open()


class TestClosingSource:
    """Tests for the shared context-manager base."""

    def test_open_is_abstract(self) -> None:
        """A source without open() cannot be instantiated."""
        with pytest.raises(TypeError):
            _ClosingSource()  # type: ignore[abstract]
