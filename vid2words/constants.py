"""Fixed ranking constants shared by the aggregation and ranking stages."""

# Maximum number of ranked words returned
TOP_K: int = 10

# Closed list of function words excluded from the ranking
STOP_WORDS: frozenset = frozenset({
    # articles and determiners
    "a", "an", "the", "this", "that", "these", "those", "some", "any",
    "each", "every", "no", "all", "both",
    # pronouns
    "i", "me", "my", "mine", "myself", "you", "your", "yours", "yourself",
    "he", "him", "his", "himself", "she", "her", "hers", "herself",
    "it", "its", "itself", "we", "us", "our", "ours", "ourselves",
    "they", "them", "their", "theirs", "themselves",
    "what", "which", "who", "whom", "whose",
    "i'm", "you're", "he's", "she's", "it's", "we're", "they're",
    "i've", "you've", "we've", "they've", "i'll", "you'll", "i'd",
    "that's", "there's",
    # conjunctions
    "and", "or", "but", "nor", "so", "if", "then", "than", "because",
    "while", "when", "where", "as",
    # auxiliary and modal verbs
    "is", "are", "was", "were", "be", "been", "being", "am",
    "have", "has", "had", "having", "do", "does", "did", "doing",
    "will", "would", "shall", "should", "can", "could", "may", "might",
    "must", "don't", "doesn't", "didn't", "isn't", "aren't", "wasn't",
    "weren't", "can't", "won't",
    # prepositions and particles
    "in", "on", "at", "of", "to", "for", "with", "by", "from", "out", "up",
    "down", "about", "into", "over", "under", "off", "through", "after",
    "before", "between", "there", "here", "not",
    # fillers
    "like", "just", "oh", "um", "uh",
})
