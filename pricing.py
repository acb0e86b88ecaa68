from .datatypes import Genre, LineResult, Performance, Play
from .errors import UnsupportedGenre

# Amounts are in cents
TRAGEDY_BASE_AMOUNT = 40000
TRAGEDY_AUDIENCE_THRESHOLD = 30
TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON = 1000

COMEDY_BASE_AMOUNT = 30000
COMEDY_AUDIENCE_THRESHOLD = 20
COMEDY_OVER_BASE_CAPACITY_AMOUNT = 10000
COMEDY_OVER_BASE_CAPACITY_PER_PERSON = 500
COMEDY_AMOUNT_PER_AUDIENCE = 300

BASE_VOLUME_CREDIT_THRESHOLD = 30
COMEDY_EXTRA_VOLUME_FACTOR = 5

PERCENT_FACTOR = 100          # cents per display unit


def amount_for(genre: Genre, audience: int) -> int:
    """Amount owed for one performance, in cents."""
    if genre is Genre.TRAGEDY:
        result = TRAGEDY_BASE_AMOUNT
        if audience > TRAGEDY_AUDIENCE_THRESHOLD:
            result += TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON * (audience - TRAGEDY_AUDIENCE_THRESHOLD)
        return result

    if genre is Genre.COMEDY:
        result = COMEDY_BASE_AMOUNT
        if audience > COMEDY_AUDIENCE_THRESHOLD:
            result += (COMEDY_OVER_BASE_CAPACITY_AMOUNT
                       + COMEDY_OVER_BASE_CAPACITY_PER_PERSON * (audience - COMEDY_AUDIENCE_THRESHOLD))
        result += COMEDY_AMOUNT_PER_AUDIENCE * audience
        return result

    # only reachable when a caller skips Genre.parse
    raise UnsupportedGenre(getattr(genre, 'value', genre))


def credits_for(genre: Genre, audience: int) -> int:
    """Volume credits earned by one performance."""
    result = max(audience - BASE_VOLUME_CREDIT_THRESHOLD, 0)
    # extra credit for every five comedy attendees
    if genre is Genre.COMEDY:
        result += audience // COMEDY_EXTRA_VOLUME_FACTOR
    return result


def price(play: Play, performance: Performance) -> LineResult:
    genre = Genre.parse(play.genre)
    return LineResult(
        amount=amount_for(genre, performance.audience),
        credits=credits_for(genre, performance.audience),
    )
