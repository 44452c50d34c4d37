"""
Script to create sample CSV exports for the five dashboard tabs so the
dashboard can be run without the squad's real test data.

Usage:
    python scripts/create_sample_data.py [output_dir]
"""
import os
import random
import sys

import pandas as pd

# Data paths
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT_DIR)

from dashboard.config.test_protocols import (  # noqa: E402
    CMJ_PROTOCOL, CMRJ_PROTOCOL, HOP_PROTOCOL, HIP_PROTOCOL, HAMSTRING_PROTOCOL, NAME_COLUMN
)

DATA_DIR = os.path.join(ROOT_DIR, 'data')

ATHLETES = [
    "Aoife McCartan", "Niamh Mallon", "Sara Louise Graffin", "Fionnuala Carr",
    "Paula O'Hagan", "Catherine McGourty", "Orla McDonald", "Ciara Donnelly",
    "Grainne Magee", "Roisin Murray", "Clodagh Byrne", "Eimear Kelly",
    "Siobhan Rooney", "Maeve Fitzpatrick", "Deirdre Savage",
]

# Athletes who missed each testing session
ABSENT_PER_TEST = 2


def side_label(left: float, right: float) -> str:
    """'12.5% L' style imbalance label, side = stronger leg"""
    if left == right:
        return "0.0% R"
    diff = abs(left - right) / max(left, right) * 100
    side = 'L' if left > right else 'R'
    return f"{diff:.1f}% {side}"


def _absent(rng: random.Random):
    return set(rng.sample(ATHLETES, ABSENT_PER_TEST))


def create_cmj_sample(rng: random.Random) -> pd.DataFrame:
    absent = _absent(rng)
    rows = []
    for name in ATHLETES:
        left = round(rng.uniform(10, 22), 1)
        right = round(left * rng.uniform(0.8, 1.2), 1)
        rows.append({
            NAME_COLUMN: name,
            'CMJ Jump Height (cm)': None if name in absent else round(rng.uniform(20, 40), 1),
            'CMJ Peak Power (W/kg)': round(rng.uniform(26, 45), 1),
            'SLCMJ Jump Height (L) (cm)': left,
            'SLCMJ Jump Height (R) (cm)': right,
            'SLCMJ Asymmetry (%)': side_label(left, right),
        })
    return pd.DataFrame(rows)


def create_cmrj_sample(rng: random.Random) -> pd.DataFrame:
    absent = _absent(rng)
    rows = []
    for name in ATHLETES:
        first = round(rng.uniform(20, 38), 1)
        left = round(rng.uniform(10, 22), 1)
        right = round(left * rng.uniform(0.8, 1.2), 1)
        rows.append({
            NAME_COLUMN: name,
            'CMRJ First Jump Height (cm)': None if name in absent else first,
            'CMRJ Rebound Jump Height (cm)': round(first * rng.uniform(0.75, 1.05), 1),
            'CMRJ Rebound Contact Time (ms)': int(rng.uniform(180, 320)),
            'SLCMJ Jump Height (L) (cm)': left,
            'SLCMJ Jump Height (R) (cm)': right,
            'SLCMJ Asymmetry (%)': side_label(left, right),
        })
    return pd.DataFrame(rows)


def create_hop_sample(rng: random.Random) -> pd.DataFrame:
    absent = _absent(rng)
    return pd.DataFrame([
        {NAME_COLUMN: name, 'RSI': None if name in absent else round(rng.uniform(1.1, 2.9), 2)}
        for name in ATHLETES
    ])


def create_hip_sample(rng: random.Random) -> pd.DataFrame:
    absent = _absent(rng)
    rows = []
    for name in ATHLETES:
        abd_l = round(rng.uniform(100, 230))
        abd_r = round(abd_l * rng.uniform(0.85, 1.15))
        add_l = round(rng.uniform(130, 270))
        add_r = round(add_l * rng.uniform(0.85, 1.15))
        rows.append({
            NAME_COLUMN: name,
            'Hip Abduction L': None if name in absent else abd_l,
            'Hip Abduction R': abd_r,
            'Hip Adduction L': add_l,
            'Hip Adduction R': add_r,
            'Hip Max Imbalance (%)': side_label(add_l, add_r),
            'Max Ratio L': round(add_l / abd_l, 2),
            'Max Ratio R': round(add_r / abd_r, 2),
        })
    return pd.DataFrame(rows)


def create_hamstring_sample(rng: random.Random) -> pd.DataFrame:
    absent = _absent(rng)
    rows = []
    for name in ATHLETES:
        nordic_l = round(rng.uniform(190, 340))
        nordic_r = round(nordic_l * rng.uniform(0.85, 1.15))
        prone_l = round(rng.uniform(160, 300))
        prone_r = round(prone_l * rng.uniform(0.85, 1.15))
        rows.append({
            NAME_COLUMN: name,
            'Nordic Max Force L': None if name in absent else nordic_l,
            'Nordic Max Force R': nordic_r,
            'Nordic Max Imbalance (%)': side_label(nordic_l, nordic_r),
            'ISO Prone Max Force L': prone_l,
            'ISO Prone Max Force R': prone_r,
            'ISO Prone Max Imbalance (%)': side_label(prone_l, prone_r),
        })
    return pd.DataFrame(rows)


SAMPLE_BUILDERS = {
    CMJ_PROTOCOL.file_name: create_cmj_sample,
    CMRJ_PROTOCOL.file_name: create_cmrj_sample,
    HOP_PROTOCOL.file_name: create_hop_sample,
    HIP_PROTOCOL.file_name: create_hip_sample,
    HAMSTRING_PROTOCOL.file_name: create_hamstring_sample,
}


def create_sample_data(output_dir: str = DATA_DIR, seed: int = 2024):
    os.makedirs(output_dir, exist_ok=True)
    rng = random.Random(seed)

    for file_name, builder in SAMPLE_BUILDERS.items():
        df = builder(rng)
        path = os.path.join(output_dir, file_name)
        df.to_csv(path, index=False)
        print(f"  Created {len(df)} rows in {path}")


if __name__ == "__main__":
    print("Creating sample test exports...")
    create_sample_data(sys.argv[1] if len(sys.argv) > 1 else DATA_DIR)
    print("Done!")
