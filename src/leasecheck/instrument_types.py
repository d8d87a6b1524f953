"""
Instrument type normalization.

Runsheets spell instrument types every which way ("WD", "Warranty Deed",
"O&G Lease", "ogl"). The normalizer maps a label onto InstrumentType using
the alias table in config/instrument_types.yaml, falling back to rapidfuzz
for near-miss spellings and to keyword containment for long lease labels.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml
from rapidfuzz import fuzz, process

from .config import SETTINGS
from .exceptions import ConfigurationError
from .models import InstrumentType

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r'[\s_\-]+')


def clean_label(label: Optional[str]) -> str:
    """Lower-case a label and collapse separators to single spaces"""
    if label is None:
        return ""
    return _SEPARATORS.sub(" ", str(label).lower()).strip()


class InstrumentTypeNormalizer:
    """Maps free-form instrument type labels onto InstrumentType"""

    def __init__(self, types_file: Optional[str] = None, fuzzy_threshold: Optional[float] = None):
        """
        Args:
            types_file: Path to the alias YAML (default: packaged instrument_types.yaml)
            fuzzy_threshold: Minimum rapidfuzz ratio for a fuzzy match (default from settings)
        """
        if types_file is None:
            types_file = SETTINGS.INSTRUMENT_TYPES_FILE
        self.fuzzy_threshold = (
            SETTINGS.FUZZY_THRESHOLD if fuzzy_threshold is None else fuzzy_threshold
        )
        self.aliases, self.keywords = self._load_types(types_file)

    def _load_types(self, types_file: str) -> Tuple[Dict[str, InstrumentType], List[Tuple[str, InstrumentType]]]:
        """Load the alias table and build alias and keyword lookups"""
        try:
            with open(Path(types_file), 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise ConfigurationError(f"Instrument types file '{types_file}' not found")
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing instrument types YAML file: {e}")

        table = data.get('instrument_types')
        if not isinstance(table, dict):
            raise ConfigurationError("Instrument types file must define an 'instrument_types' mapping")

        aliases: Dict[str, InstrumentType] = {}
        keywords: List[Tuple[str, InstrumentType]] = []
        for type_name, entry in table.items():
            try:
                instrument_type = InstrumentType(type_name)
            except ValueError:
                raise ConfigurationError(f"Unknown instrument type '{type_name}' in {types_file}")

            entry = entry or {}
            # The canonical value is always an alias of itself
            aliases[clean_label(instrument_type.value)] = instrument_type
            for alias in entry.get('aliases', []):
                aliases[clean_label(alias)] = instrument_type
            for keyword in entry.get('contains', []):
                keywords.append((clean_label(keyword), instrument_type))

        logger.debug("Loaded %d instrument type aliases from %s", len(aliases), types_file)
        return aliases, keywords

    def normalize(self, label: Optional[str]) -> InstrumentType:
        """
        Normalize an instrument type label.

        Order: exact alias, fuzzy alias, keyword containment. Anything
        unrecognized is OTHER.

        Args:
            label: Instrument type as written on the runsheet

        Returns:
            InstrumentType
        """
        if isinstance(label, InstrumentType):
            return label

        cleaned = clean_label(label)
        if not cleaned:
            return InstrumentType.OTHER

        if cleaned in self.aliases:
            return self.aliases[cleaned]

        match = process.extractOne(
            cleaned,
            self.aliases.keys(),
            scorer=fuzz.ratio,
            score_cutoff=self.fuzzy_threshold,
        )
        if match is not None:
            alias, score, _ = match
            logger.debug("Fuzzy matched instrument type '%s' to '%s' (%.1f)", label, alias, score)
            return self.aliases[alias]

        for keyword, instrument_type in self.keywords:
            if keyword in cleaned:
                return instrument_type

        return InstrumentType.OTHER
