"""
HDF5 storage for simulation trajectories
"""
from pathlib import Path

import h5py
import numpy as np


def save_trajectory(file_path, trajectory, boundary, metadata=None):
    """
    Save a single run to an HDF5 file.

    Args:
        file_path: Output file path
        trajectory: Trajectory array (T, H, W)
        boundary: Name of the boundary policy the run used
        metadata: Optional metadata dictionary stored as attributes
    """
    trajectory = np.asarray(trajectory, dtype=np.uint8)
    if trajectory.ndim != 3:
        raise ValueError(f"trajectory must be 3D (T, H, W), got shape {trajectory.shape}")

    with h5py.File(file_path, 'w') as f:
        f.create_dataset('trajectory', data=trajectory, compression='gzip')
        f.attrs['boundary'] = boundary
        f.attrs['rows'] = trajectory.shape[1]
        f.attrs['cols'] = trajectory.shape[2]
        f.attrs['num_steps'] = trajectory.shape[0] - 1

        if metadata:
            for key, value in metadata.items():
                f.attrs[key] = value

    print(f"Saved to {file_path}")
    print(f"  Shape: {trajectory.shape}")
    print(f"  Size: {Path(file_path).stat().st_size / 1024:.1f} KB")


def load_trajectory(file_path):
    """
    Load a run written by save_trajectory.

    Returns:
        Tuple of (trajectory, attrs) where attrs is a plain dict
    """
    with h5py.File(file_path, 'r') as f:
        trajectory = f['trajectory'][()]
        attrs = {key: _to_python(value) for key, value in f.attrs.items()}
    return trajectory, attrs


def save_preset_runs(file_path, runs):
    """
    Save several runs, one HDF5 group per run.

    Args:
        file_path: Output file path
        runs: Dictionary of {name: {'trajectory': array, 'boundary': str}}
    """
    with h5py.File(file_path, 'w') as f:
        for name, data in runs.items():
            grp = f.create_group(name)
            grp.create_dataset('trajectory',
                               data=np.asarray(data['trajectory'], dtype=np.uint8),
                               compression='gzip')
            grp.attrs['boundary'] = data['boundary']

    print(f"Saved to {file_path}")
    print(f"  Runs: {list(runs.keys())}")
    print(f"  Size: {Path(file_path).stat().st_size / 1024:.1f} KB")


def load_preset_runs(file_path):
    """Load runs written by save_preset_runs."""
    runs = {}
    with h5py.File(file_path, 'r') as f:
        for name, grp in f.items():
            runs[name] = {
                'trajectory': grp['trajectory'][()],
                'boundary': _to_python(grp.attrs['boundary']),
            }
    return runs


def _to_python(value):
    if isinstance(value, bytes):
        return value.decode('utf-8')
    if isinstance(value, np.generic):
        return value.item()
    return value
