"""Intent parsing and validation.

The intent layer converts an English movie-chat message into a strict `Intent` object (intent name
plus genre, rating, year, actor and title slots) that downstream movie lookups switch on.
"""
