RUNNING_COMMAND = "Running command: {}"
COMMAND_EXITED_WITH = "Command exited with code {}"
OPENING_FOLDER = "Opening folder: {}"
OPENING_FILE = "Opening file: {}"
SKIPPING_TOKEN = "Skipping '{}': not an existing file"
NO_FILES_OPENED = "No files to open for '{}'"
GIT_STEP_OK = "git {} ✔"
GIT_STEP_FAILED = "git {} exited with code {}"
GIT_ABORTED = "Aborted remaining git steps after '{}' failed"
GIT_PUSH_DONE = "Changes pushed from {}"
GIT_PUSH_INCOMPLETE = "git push from {} did not complete cleanly"
