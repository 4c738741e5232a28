from collections import deque

import numpy as np
import pandas as pd


class FrameMetrics:
    """Rolling per-chain timing and constraint error samples."""

    SERIES = ("computation_time", "constraint_error")

    def __init__(self, maxlen=100):
        self.maxlen = maxlen
        self.samples = {}

    def record(self, name, computation_time, constraint_error):
        series = self.samples.setdefault(
            name, {key: deque(maxlen=self.maxlen) for key in self.SERIES}
        )
        series['computation_time'].append(computation_time)
        series['constraint_error'].append(constraint_error)

    def reset(self):
        self.samples.clear()

    def summary(self):
        """One row per chain with mean/std/max of each series."""
        rows = []
        for name, series in self.samples.items():
            row = {'Chain': name, 'Frames': len(series['computation_time'])}
            for key in self.SERIES:
                data = list(series[key])
                if len(data) == 0:
                    continue
                row[f'{key} mean'] = np.mean(data)
                row[f'{key} std'] = np.std(data)
                row[f'{key} max'] = np.max(data)
            rows.append(row)
        return pd.DataFrame(rows)

    def format_summary(self):
        df = self.summary()
        if df.empty:
            return "No frames recorded."
        table = df.copy()
        for col in table.columns:
            if col.startswith('computation_time'):
                # seconds -> ms
                table[col] = table[col].map(lambda s: f"{s * 1000:.3f} ms")
            elif col.startswith('constraint_error'):
                table[col] = table[col].map(lambda e: f"{e:.3f} px")
        return table.to_string(index=False)
