"""Short competitive-programming exercises, one function per problem."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "abbreviate",
    "advancing_count",
    "anton_or_danik",
    "arrival_swaps",
    "banana_debt",
    "bit_plus_plus",
    "calculating_function",
    "can_split_watermelon",
    "capitalize",
    "compare_ignore_case",
    "domino_count",
    "elephant_steps",
    "fence_width",
    "fix_case",
    "gender_by_username",
    "helpful_sum",
    "hulk_feelings",
    "is_easy",
    "is_translation",
    "magnet_groups",
    "matrix_moves",
    "nearly_lucky",
    "next_distinct_year",
    "presents",
    "queue_after",
    "quirky_quantifier",
    "rooms_with_space",
    "stones_to_remove",
    "team_problems",
    "tram_capacity",
    "wrong_subtraction",
    "xor_digits",
    "years_until_bigger",
]

_MATRIX_SIZE = 5
_MATRIX_CENTER = 2


def anton_or_danik(games: str) -> str:
    """Name the player who won more games: 'A' marks Anton, anything else Danik."""
    anton = games.count("A")
    danik = len(games) - anton
    if anton > danik:
        return "Anton"
    if anton < danik:
        return "Danik"
    return "Friendship"


def arrival_swaps(heights: Sequence[int]) -> int:
    """Count adjacent swaps that put the tallest soldier first and the shortest last."""
    if not heights:
        raise ValueError("heights must not be empty")
    count = len(heights)
    max_index = heights.index(max(heights))
    min_index = count - 1 - heights[::-1].index(min(heights))
    if max_index > min_index:
        min_index += 1
    return max_index + (count - min_index - 1)


def years_until_bigger(limak: int, bob: int) -> int:
    """Count years until Limak, tripling yearly, outweighs Bob, doubling yearly."""
    if limak < 1:
        raise ValueError(f"limak must be at least 1, got {limak}")
    years = 0
    while limak <= bob:
        limak *= 3
        bob *= 2
        years += 1
    return years


def matrix_moves(matrix: Sequence[Sequence[int]]) -> int:
    """Count row or column swaps that bring the single 1 to the centre of a 5x5 matrix."""
    if len(matrix) != _MATRIX_SIZE or any(len(row) != _MATRIX_SIZE for row in matrix):
        raise ValueError("matrix must be 5 by 5")
    positions = [
        (row, column)
        for row, values in enumerate(matrix)
        for column, value in enumerate(values)
        if value == 1
    ]
    if not positions:
        raise ValueError("matrix holds no 1")
    row, column = positions[-1]
    return abs(row - _MATRIX_CENTER) + abs(column - _MATRIX_CENTER)


def _has_distinct_digits(year: int) -> bool:
    return len(set(f"{year % 10000:04d}")) == 4


def next_distinct_year(year: int) -> int:
    """Return the first year after ``year`` whose four last digits all differ."""
    year += 1
    while not _has_distinct_digits(year):
        year += 1
    return year


def bit_plus_plus(statements: Iterable[str]) -> int:
    """Run Bit++ statements such as 'X++' or '--X' on a variable starting at 0."""
    value = 0
    for statement in statements:
        operator = statement[1:2]
        if operator == "+":
            value += 1
        elif operator == "-":
            value -= 1
    return value


def gender_by_username(name: str) -> str:
    """Guess by the parity of distinct characters in a user name."""
    if len(set(name)) % 2:
        return "IGNORE HIM!"
    return "CHAT WITH HER!"


def calculating_function(n: int) -> int:
    """Return -1 + 2 - 3 + ... + (-1)^n * n."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    evens = n // 2
    odds = (n + 1) // 2
    return evens * (evens + 1) - odds * odds


def domino_count(m: int, n: int) -> int:
    """Return how many 2x1 dominoes fit on an m-by-n board."""
    if m < 0 or n < 0:
        raise ValueError("board sides must be non-negative")
    return m * n // 2


def elephant_steps(distance: int) -> int:
    """Return the fewest steps of length 1 to 5 that cover ``distance``."""
    if distance <= 5:
        return 1
    return -(-distance // 5)


def rooms_with_space(rooms: Iterable[tuple[int, int]]) -> int:
    """Count rooms, given as (occupants, capacity), with room for two more."""
    return sum(1 for occupants, capacity in rooms if capacity - occupants >= 2)


def helpful_sum(expression: str) -> str:
    """Reorder the summands of a sum such as '3+1+2' into ascending order."""
    digits = sorted(expression[::2])
    if not digits:
        raise ValueError("expression must not be empty")
    return "+".join(digits)


def hulk_feelings(layers: int) -> str:
    """Describe Hulk's feelings with ``layers`` alternating layers of hate and love."""
    parts = []
    for layer in range(1, layers + 1):
        if layer == 1:
            parts.append("I hate ")
        elif layer % 2:
            parts.append("that I hate ")
        else:
            parts.append("that I love ")
    parts.append("it")
    return "".join(parts)


def is_easy(responses: Iterable[int]) -> bool:
    """Tell whether nobody answered 1 (hard)."""
    return all(response != 1 for response in responses)


def magnet_groups(magnets: Iterable[object]) -> int:
    """Count groups of consecutive magnets laid in the same orientation."""
    groups = 0
    previous: object = object()
    for magnet in magnets:
        if magnet != previous:
            groups += 1
        previous = magnet
    return groups


def nearly_lucky(number: int) -> bool:
    """Tell whether the count of 4s and 7s in ``number`` is itself 4 or 7."""
    if number < 0:
        raise ValueError(f"number must be non-negative, got {number}")
    lucky = sum(1 for char in str(number) if char in "47") if number else 0
    return lucky in (4, 7)


def advancing_count(scores: Sequence[int], k: int) -> int:
    """Count leading positive scores that reach the score of place ``k``."""
    if not 1 <= k <= len(scores):
        raise ValueError(f"k must lie between 1 and {len(scores)}, got {k}")
    threshold = scores[k - 1]
    count = 0
    for score in scores:
        if score < threshold or score == 0:
            break
        count += 1
    return count


def compare_ignore_case(first: str, second: str) -> int:
    """Compare two strings without regard to case, returning -1, 0 or 1."""
    left, right = first.lower(), second.lower()
    if left < right:
        return -1
    if left == right:
        return 0
    return 1


def presents(gifts: Sequence[int]) -> list[int]:
    """Map each position to a gift number.

    A gift equal to its own 1-based position is kept; any other is replaced by
    the gift found at index ``gift % n``.
    """
    count = len(gifts)
    return [
        gift if gift == position else gifts[gift % count]
        for position, gift in enumerate(gifts, start=1)
    ]


def quirky_quantifier(n: int) -> int:
    """Return the remainder of ``n`` divided by 2, with the sign of ``n``."""
    return -((-n) % 2) if n < 0 else n % 2


def banana_debt(cost: int, money: int, count: int) -> int:
    """Return what must be borrowed to buy ``count`` bananas at cost, 2*cost, ..."""
    total = count * (count + 1) // 2 * cost
    return max(total - money, 0)


def stones_to_remove(stones: str) -> int:
    """Count stones to take away so that no two neighbours share a colour."""
    return sum(1 for left, right in zip(stones, stones[1:]) if left == right)


def team_problems(votes: Iterable[Sequence[int]]) -> int:
    """Count problems that at least two of the three friends are sure of."""
    return sum(1 for vote in votes if sum(vote) > 1)


def tram_capacity(stops: Iterable[tuple[int, int]]) -> int:
    """Return the tram's needed capacity from (exiting, entering) pairs per stop.

    The load is recorded before each stop where more people leave than enter.
    """
    passengers = 0
    capacity = 0
    for exiting, entering in stops:
        if entering < exiting:
            capacity = max(capacity, passengers)
        passengers += entering - exiting
    return capacity


def is_translation(first: str, second: str) -> bool:
    """Tell whether ``second`` is ``first`` written backwards."""
    return first[::-1] == second


def xor_digits(first: str, second: str) -> str:
    """XOR two equally long strings of binary digits position by position."""
    if len(first) != len(second):
        raise ValueError("both numbers must have the same length")
    return "".join(str(int(a) ^ int(b)) for a, b in zip(first, second))


def fence_width(heights: Iterable[int], fence_height: int) -> int:
    """Return the road width needed; anyone taller than the fence bends and takes 2."""
    return sum(2 if height > fence_height else 1 for height in heights)


def can_split_watermelon(weight: int) -> bool:
    """Tell whether ``weight`` splits into two positive even parts."""
    return weight % 2 == 0 and weight >= 4


def abbreviate(word: str) -> str:
    """Shorten words longer than 10 letters to first letter, count, last letter."""
    if len(word) <= 10:
        return word
    return f"{word[0]}{len(word) - 2}{word[-1]}"


def fix_case(word: str) -> str:
    """Make the word all upper case if capitals are the majority, else all lower."""
    lower = sum(1 for char in word if ord(char) >= 97)
    upper = len(word) - lower
    return word.upper() if upper > lower else word.lower()


def capitalize(word: str) -> str:
    """Upper-case the first letter and leave the rest untouched."""
    return word[:1].upper() + word[1:]


def wrong_subtraction(number: int, times: int) -> int:
    """Subtract one ``times`` times, dropping a trailing zero instead of decrementing."""
    for _ in range(times):
        if number % 10 == 0:
            number //= 10
        else:
            number -= 1
    return number


def queue_after(queue: str, seconds: int) -> str:
    """Let every boy ('B') directly ahead of a girl ('G') swap with her each second."""
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")
    for _ in range(seconds):
        queue = queue.replace("BG", "GB")
    return queue