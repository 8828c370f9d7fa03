"""Router modules for the quote backend."""
