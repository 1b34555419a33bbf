"""Common extractor interface."""

from typing import Callable

from pydantic import BaseModel

from core.document import Document
from core.models import FetchOutcome

# An extractor reads the parsed document and fetch metadata and returns one
# feature record. Extractors hold no state and never mutate their inputs.
Extractor = Callable[[Document, FetchOutcome], BaseModel]
