"""Social placeholder: guesses from a ticker allow-list, no external signal."""

from dataclasses import dataclass

GITHUB_SYMBOLS = frozenset({"USDC", "USDT", "WETH", "DAI", "LINK", "UNI"})
LARGE_COMMUNITY_SYMBOLS = frozenset({"USDC", "USDT", "WETH", "DAI"})

SENTIMENT_BY_COMMUNITY = {"LARGE": "POSITIVE", "MEDIUM": "NEUTRAL"}


@dataclass(frozen=True)
class SocialMetrics:
    github_score: int
    has_github: bool
    twitter_mentions: int
    community_size: str  # LARGE / MEDIUM / SMALL / NONE
    sentiment: str  # POSITIVE / NEUTRAL / NEGATIVE
    red_flags: tuple[str, ...] = ()


class SocialAnalyzer:
    def __init__(
        self,
        github_symbols: frozenset[str] = GITHUB_SYMBOLS,
        large_community_symbols: frozenset[str] = LARGE_COMMUNITY_SYMBOLS,
    ) -> None:
        self._github = frozenset(s.upper() for s in github_symbols)
        self._large = frozenset(s.upper() for s in large_community_symbols)

    def analyze_social(self, token_name: str, token_symbol: str) -> SocialMetrics:
        symbol = (token_symbol or "").upper()
        has_github = symbol in self._github
        community = "LARGE" if symbol in self._large else "SMALL"

        red_flags: list[str] = []
        if not has_github:
            red_flags.append("⚠️ No public GitHub repository - code not auditable")
        if community == "NONE":
            red_flags.append("🚩 No social media presence - potential scam")

        return SocialMetrics(
            github_score=70 if has_github else 20,
            has_github=has_github,
            twitter_mentions=0,
            community_size=community,
            sentiment=SENTIMENT_BY_COMMUNITY.get(community, "NEGATIVE"),
            red_flags=tuple(red_flags),
        )
