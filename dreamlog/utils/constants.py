"""
Constants used throughout the Dream Journal Analytics tool.
This includes the stop-word list, default values and technique descriptions.
"""

# Common function words excluded from dream word-frequency rankings
STOP_WORDS = frozenset({
    'the', 'and', 'a', 'an', 'to', 'of', 'in', 'is', 'was', 'were', 'are', 'be',
    'been', 'being', 'it', 'its', 'that', 'this', 'these', 'those', 'there',
    'then', 'than', 'for', 'on', 'at', 'by', 'with', 'from', 'into', 'onto',
    'as', 'but', 'or', 'nor', 'not', 'so', 'if', 'up', 'out', 'off', 'over',
    'i', 'me', 'my', 'mine', 'we', 'us', 'our', 'you', 'your', 'he', 'him',
    'his', 'she', 'her', 'they', 'them', 'their', 'who', 'whom', 'which',
    'what', 'when', 'where', 'why', 'how', 'all', 'any', 'some', 'very',
    'had', 'has', 'have', 'having', 'did', 'does', 'do', 'doing', 'just',
    'about', 'again', 'also', 'because', 'could', 'would', 'should', 'can',
    'will', 'like', 'felt', 'got', 'get', 'going', 'went', 'while', 'after',
    'before', 'each', 'other', 'such', 'only', 'own', 'same', 'too', 'now',
})

# Default values for report configuration and analysis
default_values = {
    'top_n': 10,  # Number of ranked words / dream signs returned
    'min_word_length': 3,  # Tokens shorter than this are ignored
    'recent_days': 7,  # Window for the recent dreams summary
    'min_quality': 1,  # Lowest sleep quality rating
    'max_quality': 5,  # Highest sleep quality rating
}

# Success-rate thresholds (percent) for technique recommendations
technique_recommendations = [
    (70.0, 'Continue using as primary technique'),
    (40.0, 'Combine with another technique'),
]
fallback_technique_recommendation = 'Try modifying approach or switch techniques'

# Lucid dreaming techniques tracked by the journal
technique_descriptions = {
    'MILD': 'Mnemonic Induction of Lucid Dreams - uses prospective memory to increase lucid dream frequency',
    'WBTB': 'Wake Back To Bed - wake after 4-6 hours of sleep, stay awake briefly, then return to sleep',
    'FILD': 'Finger Induced Lucid Dream - a subtle finger movement technique to enter a lucid dream directly',
    'RC': 'Reality Checks - habitual checks throughout the day to test if you are dreaming',
}
