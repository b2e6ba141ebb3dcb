# Limits for agent-facing output

# Maximum number of matching lines returned by search_in_files
MAX_SEARCH_RESULTS = 300

# Marker files used by detect_project_type, checked in order
PYTHON_MARKERS = {"requirements.txt", "pyproject.toml", "setup.py"}
RUST_MARKERS = {"Cargo.toml"}
GO_MARKERS = {"go.mod"}
WEB_SUFFIXES = (".css", ".js")
