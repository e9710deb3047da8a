import os

# Performance category thresholds (lower bound is inclusive)
EXCELLENT_THRESHOLD = 90
GOOD_THRESHOLD = 80
AVERAGE_THRESHOLD = 70

# Score bar tiers shown next to each faculty row
HIGH_TIER_THRESHOLD = 80
MEDIUM_TIER_THRESHOLD = 70

# Size of the "Top 10 Highest" / "Top 10 Lowest" leaderboards
RANKING_LIMIT = 10

# Radius of the dashboard pie chart (matches the SVG circle r="80")
PIE_RADIUS = 80

# Bearer token required by the HTTP boundary; unset disables the check
ANALYTICS_API_TOKEN = os.environ.get('ANALYTICS_API_TOKEN') or None

# Logging / server
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
HOST = os.environ.get('HOST', '127.0.0.1')
PORT = int(os.environ.get('PORT', '5000'))
MAX_PAYLOAD_SIZE = 10 * 1024 * 1024  # 10MB

# Legend labels for each performance category
CATEGORY_LABELS = {
    'excellent': 'Excellent (≥90%)',
    'good': 'Good (80-89%)',
    'average': 'Average (70-79%)',
    'needsImprovement': 'Needs Improvement (<70%)',
}

# Labels for the performance filter selector
FILTER_LABELS = {
    'all': 'All Faculty',
    'excellent': 'Excellent (≥90%)',
    'good': 'Good (80-89%)',
    'average': 'Average (70-79%)',
    'needsImprovement': 'Needs Improvement (<70%)',
    'highest': 'Top 10 Highest',
    'lowest': 'Top 10 Lowest',
}
