# =============================================================================
# agent/__init__.py
# =============================================================================
# The Google ADK layer: the planner instruction, the per-trip prompt, and
# the agent that sends it to the model (via LiteLlm) and returns the text.
#
# Nothing here parses form data or renders HTML; that is core/.
# =============================================================================
