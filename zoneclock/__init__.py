"""
ZoneClock - local times, working-hours status and shared meeting windows
for teams spread across timezones.
"""

__version__ = "0.1.0"
