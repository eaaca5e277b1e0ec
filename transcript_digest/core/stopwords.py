"""
Common English and spoken-filler words ignored when looking for topics.
"""

DEFAULT_STOPWORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "is", "am", "are", "was", "were", "be", "been", "being", "have", "has", "had", "do",
    "does", "did", "will", "would", "could", "should", "may", "might", "shall", "can",
    "this", "that", "these", "those", "it", "its", "i", "you", "he", "she", "we", "they",
    "me", "him", "her", "us", "them", "my", "your", "his", "our", "their", "what", "which",
    "who", "whom", "where", "when", "how", "why", "if", "then", "than", "so", "not", "no",
    "just", "also", "very", "really", "about", "up", "out", "all", "some", "any", "each",
    "from", "into", "over", "after", "before", "between", "under", "again", "there",
    "here", "more", "most", "other", "like", "know", "think", "going", "get", "got",
    "go", "come", "make", "take", "see", "say", "said", "one", "two", "thing", "things",
    "way", "much", "many", "well", "even", "because", "through", "right", "dont", "im",
    "thats", "youre", "ive", "weve", "theyre", "youve", "gonna", "want", "something",
    "actually", "people", "lot", "kind", "still", "back", "now", "new", "good", "first",
    "need", "look", "different", "around", "every", "down", "let", "put", "yeah", "okay",
    "oh", "um", "uh", "hey", "stuff", "basically", "literally",
})
