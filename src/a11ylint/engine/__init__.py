from .engine import ActiveRule, RuleEngine, RuleOverrides
from .options import Profile, ProfileDocument, RuleSetting, merge_setting
from .profiles import bundled_profiles, get_profile, parse_profiles, profile_names

__all__ = [
    "ActiveRule",
    "Profile",
    "ProfileDocument",
    "RuleEngine",
    "RuleOverrides",
    "RuleSetting",
    "bundled_profiles",
    "get_profile",
    "merge_setting",
    "parse_profiles",
    "profile_names",
]
