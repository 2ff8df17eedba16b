"""Page Snapshot — capture the HTML, screenshot and links of a single page."""
