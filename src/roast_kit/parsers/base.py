# parsers/base.py

from abc import ABC, abstractmethod

from .models import RoastCollection


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, text: str) -> RoastCollection:
        """
        Scan document text and return the extracted collection.

        Requirements:
        - Deterministic output for same input
        - Never raises on text input; unmatched text gives empty lists
        - No I/O
        """
        raise NotImplementedError
