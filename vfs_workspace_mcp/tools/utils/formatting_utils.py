from vfs_workspace_mcp.vfs.paths import display_path


class SearchMatch:
    def __init__(self, file_path: str, line_number: int, line: str):
        self.file_path = file_path
        self.line_number = line_number
        self.line = line


def format_size(size: int) -> str:
    """Format a byte count for humans."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def format_search_results(matches: list[SearchMatch], pattern: str, max_results: int) -> str:
    """
    Format search matches as ``path:line: text`` lines.

    Paths are shown relative to the root. Output is cut off after
    ``max_results`` matches with a note saying so.
    """
    if not matches:
        return f'No matches found for "{pattern}"'

    lines = [
        f"{display_path(match.file_path)}:{match.line_number}: {match.line.strip()}"
        for match in matches[:max_results]
    ]
    if len(matches) > max_results:
        lines.append(f"... results truncated at {max_results} of {len(matches)} matches")
    return "\n".join(lines)
