"""
SVG path repository for reading path data out of SVG documents.

This repository handles:
- Parsing SVG markup with xmltodict
- Finding <path> elements at any depth (inside <g>, <defs>, prefixed "svg:path", ...)
- Decoding each element's `d` attribute into a PathSequence and its canonical text
- Scanning a configured directory for SVG files
"""

import logging
from pathlib import Path
from typing import Any

import xmltodict

from svg_editor.path_data.config import PathDataConfig, get_config
from svg_editor.path_data.entities.path_element import PathElement
from svg_editor.path_data.errors import PathParseError
from svg_editor.path_data.path_decoder.decoder import parse_path
from svg_editor.path_data.path_decoder.renderer import serialize

logger = logging.getLogger(__name__)


class SVGPathRepository:
    """Repository for reading <path> elements from SVG documents."""

    @staticmethod
    def find_path_attributes(node: Any) -> list[dict[str, Any]]:
        """
        Collect the attribute dicts of every <path> element below `node`.

        Args:
            node: xmltodict output (dict, list of dicts, text or None)

        Returns:
            Attribute dicts in the order xmltodict yields them. Elements are
            grouped per tag name within each parent, so sibling <path> and <g>
            elements do not keep their interleaving.
        """
        found: list[dict[str, Any]] = []
        if isinstance(node, list):
            for item in node:
                found.extend(SVGPathRepository.find_path_attributes(item))
            return found
        if not isinstance(node, dict):
            return found

        for key, value in node.items():
            if key.startswith(("@", "#")):
                continue
            # Drop namespace prefixes, e.g. "svg:path" -> "path"
            local_name = key.rsplit(":", 1)[-1]
            if local_name == "path":
                elements = value if isinstance(value, list) else [value]
                for element in elements:
                    found.append(element if isinstance(element, dict) else {})
            found.extend(SVGPathRepository.find_path_attributes(value))
        return found

    @staticmethod
    def parse_svg_string(
        svg_text: str, source: str | None = None, precision: int | None = None
    ) -> list[PathElement]:
        """
        Parse SVG markup and decode the `d` attribute of every path element.

        Args:
            svg_text: SVG document text
            source: optional label (e.g. a file name) stored on each element
            precision: decimal places of each element's `canonical_d`;
                None keeps exact round-trip digits

        Returns:
            One PathElement per <path> carrying a `d` attribute.

        Raises:
            PathParseError: a `d` attribute is not valid path data.
        """
        doc = xmltodict.parse(svg_text)

        elements: list[PathElement] = []
        for attributes in SVGPathRepository.find_path_attributes(doc):
            d = attributes.get("@d")
            if d is None:
                continue
            element_id = attributes.get("@id")
            try:
                instructions = parse_path(d)
            except PathParseError as e:
                logger.error("Invalid path data in element %r of %s: %s", element_id, source or "<string>", e)
                raise
            elements.append(
                PathElement(
                    d=d,
                    id=element_id,
                    source=source,
                    instructions=instructions,
                    canonical_d=serialize(instructions, precision=precision),
                )
            )

        logger.debug("Read %d path element(s) from %s", len(elements), source or "<string>")
        return elements

    @staticmethod
    def load_svg_file(
        svg_path: Path, encoding: str = "utf-8", precision: int | None = None
    ) -> list[PathElement]:
        """Read one SVG file and decode its path elements."""
        with open(svg_path, "r", encoding=encoding) as f:
            return SVGPathRepository.parse_svg_string(f.read(), source=str(svg_path), precision=precision)

    @staticmethod
    def load_directory(config: PathDataConfig | None = None) -> list[PathElement]:
        """
        Decode the path elements of every SVG file matching the configured glob.

        Args:
            config: configuration to use; defaults to the get_config() singleton

        Returns:
            Path elements of all files, files visited in sorted order, with
            `canonical_d` rounded to the configured number_precision.
        """
        config = config or get_config()
        input_dir = Path(config.svg.input_dir)
        if not input_dir.exists():
            logger.error("SVG input dir does not exist: %s", input_dir)
            return []

        svg_files = sorted(input_dir.glob(config.svg.svg_glob))
        logger.info("Scanning %s with pattern '%s' → found %d SVG file(s)", input_dir, config.svg.svg_glob, len(svg_files))

        elements: list[PathElement] = []
        for svg_file in svg_files:
            elements.extend(
                SVGPathRepository.load_svg_file(
                    svg_file, encoding=config.svg.encoding, precision=config.number_precision
                )
            )
        return elements
