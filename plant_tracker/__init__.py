"""Plant Tracker API: house plants and care calendar with token authentication."""
