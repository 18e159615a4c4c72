# =============================================================================
# tools/__init__.py
# =============================================================================
# The FastMCP server: MCP tools and HTTP routes that wrap core/ and agent/.
# Tools validate input, call the pipeline, and return plain dicts for JSON.
# =============================================================================
