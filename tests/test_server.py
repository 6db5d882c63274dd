"""Tests for the MCP server wiring."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import asyncio

from file_converter.server import build_server
from file_converter.tools import TOOLS


class TestBuildServer:

    def test_registers_every_tool(self):
        listed = asyncio.run(build_server().list_tools())
        assert sorted(t.name for t in listed) == sorted(t.name for t in TOOLS)

    def test_descriptions_match_langchain_tools(self):
        listed = {t.name: t for t in asyncio.run(build_server().list_tools())}
        for lc_tool in TOOLS:
            assert listed[lc_tool.name].description == lc_tool.description

    def test_input_schema_keeps_parameters(self):
        listed = {t.name: t for t in asyncio.run(build_server().list_tools())}
        schema = listed["convert_pdf"].inputSchema
        assert "pdf_path" in schema["properties"]
        assert schema["required"] == ["pdf_path"]
