"""
Corpus loader: fetch a tab-separated review file and parse it into Reviews.

The file needs a header row with a ``text`` column; other columns are ignored.
Rows with more fields than the header make the whole file malformed.
Blank lines are skipped and rows whose text is missing or blank after
trimming are dropped. Source row order is preserved.
"""

import asyncio
import io
import warnings
from pathlib import Path
from typing import Optional

import httpx
import pandas as pd
import structlog

from review_sentiment.exceptions import EmptyCorpusError, FetchError, ParseError
from review_sentiment.models.review_models import Corpus, Review
from review_sentiment.monitoring.metrics import corpus_reviews_loaded


logger = structlog.get_logger(__name__)

TEXT_COLUMN = "text"


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


async def fetch_corpus_text(
    source: str,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = 30.0,
) -> str:
    """
    Fetch the raw corpus text from a URL or a local path.
    
    Args:
        source: http(s) URL or filesystem path
        client: Optional httpx client to reuse (tests inject one with a mock transport)
        timeout: Request timeout in seconds when a client has to be created
        
    Returns:
        Raw file contents
        
    Raises:
        FetchError: Non-2xx response, network failure, or unreadable file
        ParseError: Local file is not valid UTF-8
    """
    if not _is_url(source):
        path = Path(source)
        try:
            return await asyncio.to_thread(path.read_text, encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(
                f"Error parsing TSV file: not valid UTF-8 ({e.reason} at byte {e.start})",
                details={"source": source, "parse_error": str(e)},
            ) from e
        except OSError as e:
            raise FetchError(
                f"Failed to load TSV file: {e.strerror or e}",
                details={"source": source, "error_type": type(e).__name__},
            ) from e
    
    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(timeout=httpx.Timeout(timeout), follow_redirects=True)
    try:
        response = await client.get(source)
    except httpx.RequestError as e:
        raise FetchError(
            f"Error loading reviews: {e}",
            details={"source": source, "error_type": type(e).__name__},
        ) from e
    finally:
        if owns_client:
            await client.aclose()
    
    if not response.is_success:
        raise FetchError(
            f"Failed to load TSV file: {response.status_code}",
            details={"source": source, "status": response.status_code},
        )
    return response.text


def parse_corpus(raw_text: str) -> Corpus:
    """
    Parse tab-separated text into an ordered tuple of Reviews.
    
    Args:
        raw_text: Full file contents including the header row
        
    Returns:
        Reviews with non-blank text, in source order
        
    Raises:
        ParseError: The parser rejected the file (first error message kept)
        EmptyCorpusError: No row has usable text
    """
    try:
        # Surplus fields only warn under index_col=False
        with warnings.catch_warnings():
            warnings.simplefilter("error", pd.errors.ParserWarning)
            frame = pd.read_csv(
                io.StringIO(raw_text),
                sep="\t",
                dtype=str,
                index_col=False,
                keep_default_na=False,
                skip_blank_lines=True,
            )
    except pd.errors.EmptyDataError as e:
        raise EmptyCorpusError(
            "No valid reviews found in the TSV file",
            details={"parse_error": str(e)},
        ) from e
    except (pd.errors.ParserError, pd.errors.ParserWarning) as e:
        first_error = str(e).strip().splitlines()[0] if str(e).strip() else type(e).__name__
        raise ParseError(
            f"Error parsing TSV file: {first_error}",
            details={"parse_error": first_error},
        ) from e
    
    if TEXT_COLUMN not in frame.columns:
        logger.warning("Corpus has no text column", columns=list(frame.columns))
        raise EmptyCorpusError(
            "No valid reviews found in the TSV file",
            details={"columns": list(frame.columns)},
        )
    
    reviews = tuple(
        Review(text=value.strip())
        for value in frame[TEXT_COLUMN].fillna("")
        if isinstance(value, str) and value.strip()
    )
    
    if not reviews:
        raise EmptyCorpusError(
            "No valid reviews found in the TSV file",
            details={"rows": len(frame)},
        )
    
    logger.debug("Parsed corpus", rows=len(frame), reviews=len(reviews))
    return reviews


async def load_corpus(
    source: str,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = 30.0,
) -> Corpus:
    """
    Fetch and parse the review corpus (runs once at startup).
    
    Raises:
        FetchError, ParseError, EmptyCorpusError
    """
    logger.info("Loading corpus", source=source)
    raw_text = await fetch_corpus_text(source, client=client, timeout=timeout)
    corpus = parse_corpus(raw_text)
    
    corpus_reviews_loaded.set(len(corpus))
    logger.info("Corpus loaded", source=source, reviews=len(corpus))
    return corpus
