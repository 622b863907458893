"""Host adapters embedding the editor in concrete UI toolkits."""
