"""Transport-agnostic core: view state, app state and rendering."""
