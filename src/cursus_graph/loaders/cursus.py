"""Loader for cursus documents from files, strings or URLs."""

import asyncio
from pathlib import Path
from typing import List, Optional, Union

import aiohttp

from cursus_graph.clients import HTTPClient
from cursus_graph.exceptions import IngestionError
from cursus_graph.logging import get_logger
from cursus_graph.models import ConceptRegistry, Course
from cursus_graph.utils import CursusParser

logger = get_logger(__name__)


class CursusLoader:
    """Reads one curriculum document into a list of courses.

    The loader owns the concept registry shared by everything it reads, so
    concepts with the same name are the same object across the document.

    Local files and strings are read synchronously. Remote documents are
    fetched through an HTTP client; the loader must then be used as an async
    context manager.

    Example:
        # Local file
        >>> courses = CursusLoader().load_file("cursus.xml")

        # Remote document - loader manages HTTP client automatically
        >>> async with CursusLoader() as loader:
        ...     courses = await loader.fetch("https://example.org/cursus.xml")

        # Bring your own HTTP client
        >>> async with HTTPClient(timeout=10) as client:
        ...     async with CursusLoader(client) as loader:
        ...         courses = await loader.fetch("https://example.org/cursus.xml")
    """

    DEFAULT_ENCODING = "utf-8"

    def __init__(
        self,
        http_client: Optional[HTTPClient] = None,
        registry: Optional[ConceptRegistry] = None,
        encoding: str = DEFAULT_ENCODING,
    ):
        """Initialize the loader.

        Args:
            http_client: Optional HTTP client. If None, loader creates and manages its own
            registry: Optional concept registry. If None, a new one is created
            encoding: Encoding of local files
        """
        self._external_client = http_client
        self._internal_client: Optional[HTTPClient] = None
        self.http_client: Optional[HTTPClient] = http_client
        self.registry = registry if registry is not None else ConceptRegistry()
        self.parser = CursusParser(self.registry)
        self.encoding = encoding

    async def __aenter__(self):
        """Enter async context manager."""
        if self._external_client is None:
            self._internal_client = HTTPClient()
            await self._internal_client.__aenter__()
            self.http_client = self._internal_client
            logger.debug("Created internal HTTP client")
        else:
            self.http_client = self._external_client
            logger.debug("Using external HTTP client")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager."""
        if self._internal_client is not None:
            await self._internal_client.__aexit__(exc_type, exc_val, exc_tb)
            self._internal_client = None
            self.http_client = None
            logger.debug("Closed internal HTTP client")
        return False

    def load_text(self, text: Union[str, bytes], source: str = "<document>") -> List[Course]:
        """Parse a document held in memory.

        Args:
            text: Document content
            source: Name used in logs and error messages

        Returns:
            Courses in document order
        """
        courses = self.parser.parse(text, source)
        logger.info(
            "Curriculum loaded", source=source, courses=len(courses), concepts=len(self.registry)
        )
        return courses

    def load_file(self, path: Union[str, Path]) -> List[Course]:
        """Read and parse a local document.

        Args:
            path: Path of the document

        Returns:
            Courses in document order

        Raises:
            IngestionError: If the file cannot be read or parsed
        """
        path = Path(path)
        try:
            text = path.read_text(encoding=self.encoding)
        except OSError as e:
            raise IngestionError(str(path), e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise IngestionError(str(path), f"not valid {self.encoding}: {e.reason}") from e

        return self.load_text(text, str(path))

    async def fetch(self, url: str) -> List[Course]:
        """Download and parse a remote document.

        Args:
            url: Document URL

        Returns:
            Courses in document order

        Raises:
            RuntimeError: If called outside the async context manager
            IngestionError: If the document cannot be downloaded or parsed
        """
        if self.http_client is None:
            raise RuntimeError("CursusLoader must be used as async context manager to fetch")

        logger.debug("Fetching document", url=url)
        try:
            text = await self.http_client.get(url)
        except aiohttp.ClientError as e:
            raise IngestionError(url, str(e)) from e
        except asyncio.TimeoutError as e:
            raise IngestionError(url, "request timed out") from e

        return self.load_text(text, url)
