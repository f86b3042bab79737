import unittest
from datetime import datetime

from src.clock import (
    clock_hands,
    format_date,
    format_time,
    local_now,
    render_clock_svg,
    tick_positions,
    weekday_label,
)


class ClockTest(unittest.TestCase):
    def test_hand_angles(self):
        hands = clock_hands(datetime(2026, 10, 19, 15, 30, 45))
        self.assertEqual(hands["hour"], 3 * 30 + 30 * 0.5)
        self.assertEqual(hands["minute"], 180)
        self.assertEqual(hands["second"], 270)

    def test_midnight_and_noon_share_hour_angle(self):
        self.assertEqual(clock_hands(datetime(2026, 1, 1, 0, 0))["hour"], 0)
        self.assertEqual(clock_hands(datetime(2026, 1, 1, 12, 0))["hour"], 0)

    def test_labels(self):
        # 2026-10-18 is a Sunday
        self.assertEqual(weekday_label(datetime(2026, 10, 18)), "星期日")
        self.assertEqual(weekday_label(datetime(2026, 10, 19)), "星期一")
        self.assertEqual(format_date(datetime(2026, 3, 7)), "2026/3/7")
        self.assertEqual(format_time(datetime(2026, 3, 7, 21, 4, 9)), "21:04:09")

    def test_local_now_is_timezone_aware(self):
        self.assertIsNotNone(local_now().tzinfo)
        self.assertIsNotNone(local_now("Not/AZone").tzinfo)

    def test_malformed_zone_key_falls_back_to_utc(self):
        self.assertEqual(local_now("/etc/localtime").utcoffset().total_seconds(), 0)
        self.assertEqual(local_now("../UTC").utcoffset().total_seconds(), 0)

    def test_svg_has_ticks_and_hands(self):
        self.assertEqual(len(tick_positions()), 12)
        self.assertEqual(tick_positions()[0], (50.0, 12.0))
        svg = render_clock_svg(datetime(2026, 10, 19, 15, 30, 45))
        self.assertEqual(svg.count("<rect"), 3)
        self.assertIn("rotate(105.0, 50, 50)", svg)
        self.assertIn("rotate(270, 50, 50)", svg)


if __name__ == "__main__":
    unittest.main()
