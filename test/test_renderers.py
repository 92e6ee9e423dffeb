"""Tests for output writers."""

import sys
import unittest
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from QueryDSL.config import parse_config_dict
from QueryDSL.core.term import SpanTermQuery, TermQuery
from QueryDSL.renderers import (
    BinaryOutputWriter,
    JsonOutputWriter,
    MultiOutputWriter,
    create_output_writer,
    load_hex,
    render_hex,
)


class TestRenderFunctions(unittest.TestCase):
    def test_hex_round_trip(self) -> None:
        query = SpanTermQuery("title", "x", boost=2.0, query_name="q")
        decoded = load_hex(render_hex(query))
        self.assertEqual(decoded, query)
        self.assertEqual(decoded.query_name, "q")

    def test_load_hex_ignores_whitespace(self) -> None:
        encoded = render_hex(TermQuery("f", "v"))
        wrapped = encoded[:6] + "\n  " + encoded[6:]
        self.assertEqual(load_hex(wrapped), TermQuery("f", "v"))

    def test_load_hex_rejects_non_hex(self) -> None:
        with self.assertRaises(ValueError):
            load_hex("zz")


class TestWriters(unittest.TestCase):
    def test_json_writer_echoes_each_query(self) -> None:
        writer = JsonOutputWriter(indent=0)
        with patch("QueryDSL.renderers.json.click.echo") as echo:
            writer.write_query(TermQuery("user.id", "abc"))
            writer.finalize("render")
        echo.assert_called_once_with('{"term": {"user.id": {"value": "abc"}}}')
        self.assertEqual(writer.count, 1)

    def test_json_writer_keeps_non_ascii_and_indent(self) -> None:
        writer = JsonOutputWriter(indent=2)
        with patch("QueryDSL.renderers.json.click.echo") as echo:
            writer.write_query(TermQuery("f", "café"))
        echo.assert_called_once_with(TermQuery("f", "café").to_json(indent=2))
        self.assertIn("café", echo.call_args.args[0])
        self.assertIn("\n", echo.call_args.args[0])

    def test_binary_writer_echoes_hex(self) -> None:
        writer = BinaryOutputWriter()
        query = TermQuery("f", True)
        with patch("QueryDSL.renderers.binary.click.echo") as echo:
            writer.write_query(query)
        echo.assert_called_once_with(render_hex(query))
        self.assertGreater(writer.total_bytes, 0)

    def test_factory_follows_config_order(self) -> None:
        cfg = parse_config_dict({"output": {"formats": ["binary", "json"]}})
        writer = create_output_writer(cfg)
        self.assertIsInstance(writer, MultiOutputWriter)
        self.assertEqual([type(w) for w in writer.writers], [BinaryOutputWriter, JsonOutputWriter])

    def test_factory_override(self) -> None:
        cfg = parse_config_dict({})
        writer = create_output_writer(cfg, ("binary",))
        self.assertEqual([type(w) for w in writer.writers], [BinaryOutputWriter])

    def test_factory_rejects_unknown_format(self) -> None:
        with self.assertRaises(ValueError):
            create_output_writer(parse_config_dict({}), ("xml",))


if __name__ == "__main__":
    unittest.main()
