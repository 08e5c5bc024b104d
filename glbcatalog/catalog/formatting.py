from datetime import datetime

def format_file_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024.0:.2f} KB"
    return f"{size / (1024.0 * 1024.0):.2f} MB"

def format_added_date(millis: int) -> str:
    return "Added: " + datetime.fromtimestamp(millis / 1000).strftime("%b %d, %Y")
