"""
NavLights Core - Lookout Demo

항해등 관측 결과로 진행 방향을 판단하고 쌍안경 시야 안의 선박 수를 집계
"""
from navlights_core import (
    Heading,
    HeadingClassifier,
    Vessel,
    build_horizon,
    count_vessels,
    most_vessels,
)

TOWARDS = ("R", "G")

HORIZON = build_horizon({
    0: ("b",), 3: ("R",), 5: TOWARDS, 14: ("W",), 19: ("W",),
    21: ("R",), 26: ("G",), 35: TOWARDS, 42: TOWARDS, 47: TOWARDS,
    55: TOWARDS, 67: ("W", "G"), 74: TOWARDS, 78: ("W",), 82: ("R",),
    95: TOWARDS, 137: TOWARDS, 145: TOWARDS, 172: TOWARDS, 182: ("W",),
    198: TOWARDS, 207: TOWARDS, 212: TOWARDS, 229: TOWARDS, 231: TOWARDS,
    246: TOWARDS, 259: TOWARDS, 263: TOWARDS, 301: TOWARDS, 328: TOWARDS,
    346: TOWARDS, 358: TOWARDS, 359: ("W",),
})


def main():
    print("=" * 60)
    print("NavLights Core - Lookout")
    print("=" * 60)

    # 1. 개별 선박 판단
    print("\n[Vessels]")
    for marks in (("xsaf", "g"), ("r", "g"), ("w", "g"), ("w", "r"), ("g",)):
        heading = Vessel(marks).heading
        print(f"{''.join(marks):>6} -> {heading.value.upper():8} "
              f"{HeadingClassifier.get_heading_description(heading)}")

    # 2. 쌍안경 시야 집계
    print("\n[Binoculars]")
    queries = [
        (0, 30, None),
        (0, 30, Heading.UNKNOWN),
        (0, 30, Heading.AWAY),
        (15, 60, None),
        (350, 80, None),
    ]
    for center, angle, heading in queries:
        if heading is None:
            count = count_vessels(HORIZON, center, angle)
            label = "any"
        else:
            count = count_vessels(HORIZON, center, angle, lambda h, target=heading: h == target)
            label = heading.value
        print(f"center={center:3d}° angle={angle:3d}° heading={label:8} -> {count} vessels")

    # 3. 최다 선박 방위
    print("\n[Best Bearing]")
    for angle in (20, 30):
        print(f"angle={angle:3d}° -> point binoculars at {most_vessels(HORIZON, angle)}°")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
