CREATING_STORAGE = "Creating storage for shortcuts..."
NO_SHORTCUTS_FOUND = "No shortcuts found"
SHORTCUT_ADDED = "Adding shortcut: {} -> {}"
SHORTCUT_REMOVED = "Removed {} shortcut(s) named '{}'"
SHORTCUT_NOT_FOUND = "No shortcut found with name '{}'"
SHORTCUT_UPDATED = "Updated shortcut: {} -> {}"
SHORTCUT_UNCHANGED = "No new command given, '{}' left unchanged"
RESOLVING_PATHS = "Resolving command paths..."
STORE_RESET = "Shortcut store deleted: {}"
STORE_ALREADY_GONE = "Shortcut store already absent: {}"
RESET_CANCELLED = "Reset cancelled."
CONFIRM_RESET = "Delete all shortcuts in {}?"
