"""Input sources: where a dataset's text stream comes from.

Classes
-------
InputSource
    Protocol: a ``source`` identifier plus ``open()`` returning a text stream.
InputFile
    File-backed source (the default for the CLI).
InputURL
    HTTP-backed source fetched with httpx.

Both concrete sources are context managers that close the stream on exit.
"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import httpx

from regionstats.config import setup_logging
from regionstats.errors import SourceOpenError

if TYPE_CHECKING:
    from types import TracebackType
    from typing import TextIO

logger = setup_logging(__name__)


@runtime_checkable
class InputSource(Protocol):
    """Anything that can be identified and opened for reading."""

    @property
    def source(self) -> str:
        """Unique identifier for the source (path or URL)."""
        ...

    def open(self) -> TextIO:
        """Open the source and return a readable text stream."""
        ...


class _ClosingSource(ABC):
    """Shared context-manager behaviour for the concrete sources."""

    _stream: TextIO | None = None

    @abstractmethod
    def open(self) -> TextIO:
        """Open the source and return a readable text stream."""

    def close(self) -> None:
        """Close the stream returned by :meth:`open`, if any."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def __enter__(self) -> TextIO:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class InputFile(_ClosingSource):
    """A dataset stored in a local file.

    Examples
    --------
    >>> with InputFile("datasets/areas.csv") as stream:  # doctest: +SKIP
    ...     header = stream.readline()
    """

    def __init__(self, path: Path | str, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding
        self._stream = None

    @property
    def source(self) -> str:
        """The file path as given."""
        return str(self._path)

    def open(self) -> TextIO:
        """Open the file for reading.

        Raises
        ------
        SourceOpenError
            If the file cannot be opened.
        """
        self.close()
        try:
            self._stream = self._path.open(encoding=self._encoding)
        except OSError as e:
            msg = f"InputFile.open: Failed to open file {self.source}"
            raise SourceOpenError(msg) from e
        return self._stream


class _NamedStringIO(io.StringIO):
    """StringIO carrying a ``name`` so parsers can label log messages."""

    def __init__(self, text: str, name: str) -> None:
        super().__init__(text)
        self.name = name


class InputURL(_ClosingSource):
    """A dataset fetched over HTTP(S).

    Parameters
    ----------
    url : str
        Address to fetch (redirects are followed).
    timeout : float, optional
        Request timeout in seconds. Default 60.0.
    client : httpx.Client or None, optional
        Client to reuse; one is created per request when omitted.
    """

    def __init__(self, url: str, timeout: float = 60.0, client: httpx.Client | None = None) -> None:
        self._url = url
        self._timeout = timeout
        self._client = client
        self._stream = None

    @property
    def source(self) -> str:
        """The URL as given."""
        return self._url

    def _fetch(self, client: httpx.Client) -> str:
        resp = client.get(self._url)
        resp.raise_for_status()  # Raise on 4xx/5xx
        return resp.text

    def open(self) -> TextIO:
        """Fetch the body and return it as a text stream.

        Raises
        ------
        SourceOpenError
            If the request fails or returns an error status.
        """
        self.close()
        logger.info("Fetching: %s", self._url)
        try:
            if self._client is not None:
                text = self._fetch(self._client)
            else:
                with httpx.Client(timeout=self._timeout, follow_redirects=True) as sync_client:
                    text = self._fetch(sync_client)
        except httpx.HTTPError as e:
            msg = f"InputURL.open: Failed to fetch {self._url} ({e})"
            raise SourceOpenError(msg) from e

        logger.debug("Fetched %d characters from %s", len(text), self._url)
        self._stream = _NamedStringIO(text, self._url)
        return self._stream
