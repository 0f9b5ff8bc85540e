"""Rule evaluation and checkout session."""
