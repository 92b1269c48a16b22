import numpy as np

import ekeys

# A position that eases out of (0, 0), overshoots on the way to (100, 50), then settles.
KEYS = [
    {"keyTime": 0.0, "keyValue": [0, 0], "easeOut": 60},
    {"keyTime": 1.0, "keyValue": [100, 50], "easeIn": 20, "velocityIn": -40},
    {"keyTime": 1.5, "keyValue": [100, 50]},
]


def main() -> None:
    anim = ekeys.Animation(KEYS)
    for t in np.linspace(0.0, 1.5, 16):
        x, y = anim.evaluate(float(t))
        print(f"t={t:4.2f}  x={x:7.2f}  y={y:6.2f}")

    # Same keys through the HTTP API.
    server = ekeys.run(port=0, log_level="warning")
    client = server.client()
    print("remote t=0.5:", client.evaluate(KEYS, 0.5))
    print("remote easeInOutCubic t=0.5:", client.evaluate(KEYS, 0.5, preset="easeInOutCubic"))


if __name__ == "__main__":
    main()
