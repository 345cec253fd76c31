"""站点适配器模块"""

from coin_report.sites.base import RewardsSiteAdapter
from coin_report.sites.kuaishou import KuaishouAdapter

__all__ = [
    "RewardsSiteAdapter",
    "KuaishouAdapter",
]
