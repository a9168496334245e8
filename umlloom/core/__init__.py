"""umlloom core: Java parsing, the type model, and class diagram rendering."""
