"""HTTP blueprints for the maze JSON API."""
