"""
Pose interpolation helpers for renderers.

The core only publishes pose targets; these helpers are for clients that
want transition frames or per-frame smoothing toward a target.
"""

import numpy as np

from .poses import FINGERS, JOINTS, FingerState, JointRotation, SignPose

VECTOR_SIZE = len(JOINTS) * 3 + 2 * len(FINGERS)


def pose_to_vector(pose: SignPose) -> np.ndarray:
    """
    Flatten a pose into a float vector.

    Layout: six joints (x, y, z) in JOINTS order, then left and right
    finger curls in FINGERS order.
    """
    values = []
    for joint in JOINTS:
        values.extend(getattr(pose, joint).as_tuple())
    values.extend(pose.left_hand.as_tuple())
    values.extend(pose.right_hand.as_tuple())
    return np.array(values, dtype=np.float64)


def vector_to_pose(vector, template: SignPose) -> SignPose:
    """Rebuild a pose from a vector, copying labels from ``template``."""
    vector = np.asarray(vector, dtype=np.float64)
    joints = {
        joint: JointRotation(*vector[i * 3:i * 3 + 3].tolist())
        for i, joint in enumerate(JOINTS)
    }
    offset = len(JOINTS) * 3
    left = FingerState(*vector[offset:offset + 5].tolist())
    right = FingerState(*vector[offset + 5:offset + 10].tolist())

    return SignPose(
        description=template.description,
        left_hand=left,
        right_hand=right,
        facial_expression=template.facial_expression,
        method=template.method,
        confidence=template.confidence,
        **joints,
    )


def interpolate_poses(pose_a: SignPose, pose_b: SignPose, n_frames: int):
    """
    Linear interpolation between two poses.

    Args:
        pose_a: Starting pose
        pose_b: Ending pose
        n_frames: Number of frames to generate

    Returns:
        List of poses; labels come from pose_b
    """
    a = pose_to_vector(pose_a)
    b = pose_to_vector(pose_b)

    frames = []
    for t in range(n_frames):
        alpha = t / (n_frames - 1) if n_frames > 1 else 0
        frames.append(vector_to_pose(a * (1 - alpha) + b * alpha, pose_b))

    return frames


def approach(current: SignPose, target: SignPose, factor: float) -> SignPose:
    """One smoothing step: move ``factor`` of the way from current to target."""
    factor = float(np.clip(factor, 0.0, 1.0))
    a = pose_to_vector(current)
    b = pose_to_vector(target)
    return vector_to_pose(a + (b - a) * factor, target)
