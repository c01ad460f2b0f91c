"""
COMMANDS - Write operations (CQRS)

Commands change state. Each command has:
- Command class: frozen dataclass carrying the input
- Handler class: executes the write through the repository ports

Subfolders:
- todos/ → create_todo, update_todo, delete_todo
"""
