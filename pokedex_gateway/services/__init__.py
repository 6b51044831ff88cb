"""Services Layer — orchestrates infrastructure calls around pure core logic."""
