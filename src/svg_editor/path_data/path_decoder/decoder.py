# svg_editor/path_data/path_decoder/decoder.py

import logging

from .parser import parse
from .sequence import PathSequence
from .tokenizer import normalize, tokenize

logger = logging.getLogger(__name__)


def parse_path(text: str) -> PathSequence:
    """Entrypoint: decode path-data text into a linked PathSequence.

    Args:
      text   path-data text, e.g. "M 0 0 L 10 10 20 20"

    Returns:
      PathSequence (empty for empty or blank text)

    Raises:
      PathParseError (or a subclass) on the first bad command group; no
      partial sequence is returned.

    """
    groups = tokenize(text)
    sequence = parse(groups, normalize(text))
    logger.debug("Decoded path data of %d character(s) into %d instruction(s)", len(text or ""), len(sequence))
    return sequence
