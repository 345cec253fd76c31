"""快手极速版多账号金币统计"""

__version__ = "0.1.0"
