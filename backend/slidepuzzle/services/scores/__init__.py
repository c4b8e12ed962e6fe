"""Score services: submission parsing, storage and leaderboard queries."""
