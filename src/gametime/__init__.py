"""Game-theory decision planner for recurring everyday choices."""
