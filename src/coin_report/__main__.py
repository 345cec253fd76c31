"""快手极速版金币统计主入口"""

from coin_report.run import main

if __name__ == "__main__":
    main()
