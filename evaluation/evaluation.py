#!/usr/bin/env python3
"""
Benchmark runner for the Huffman compressor.

This evaluation script:
- Compresses and decompresses a fixed set of generated inputs
- Verifies every round trip and records sizes and timings
- Generates a structured JSON report with environment metadata

Run with:
    python evaluation/evaluation.py [options]
"""
import json
import platform
import random
import subprocess
import sys
import time
import uuid
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from huffman_errors import HuffmanError  # noqa: E402
from huffman_service import HuffmanService  # noqa: E402


def generate_run_id():
    """Generate a short unique run ID."""
    return uuid.uuid4().hex[:8]


def get_git_info():
    """Get git commit and branch information."""
    git_info = {"git_commit": "unknown", "git_branch": "unknown"}
    for key, cmd in (("git_commit", ["git", "rev-parse", "HEAD"]),
                     ("git_branch", ["git", "rev-parse", "--abbrev-ref", "HEAD"])):
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                cwd=str(PROJECT_ROOT),
                timeout=5
            )
        except (OSError, subprocess.TimeoutExpired):
            continue
        if result.returncode == 0:
            value = result.stdout.strip()
            git_info[key] = value[:8] if key == "git_commit" else value
    return git_info


def get_environment_info():
    """Collect environment information for the report."""
    git_info = get_git_info()

    return {
        "python_version": platform.python_version(),
        "platform": platform.platform(),
        "os": platform.system(),
        "os_release": platform.release(),
        "architecture": platform.machine(),
        "hostname": platform.node(),
        "git_commit": git_info["git_commit"],
        "git_branch": git_info["git_branch"],
    }


def build_samples(seed=1234, size=64 * 1024):
    """Inputs covering the interesting shapes of a frequency table."""
    rng = random.Random(seed)
    text = b"the quick brown fox jumps over the lazy dog. "
    return {
        "empty": b"",
        "single_byte_repeated": b"A" * size,
        "all_byte_values": bytes(range(256)),
        "skewed_text": (text * (size // len(text) + 1))[:size],
        "skewed_binary": bytes(rng.choice(b"\x00\x00\x00\x00\x01\xff") for _ in range(size)),
        "random_bytes": bytes(rng.getrandbits(8) for _ in range(size)),
    }


def run_sample(service, name, data):
    print(f"  {name}: {len(data)} bytes", end="", flush=True)
    try:
        t0 = time.perf_counter()
        artifact = service.compress_bytes(data)
        t1 = time.perf_counter()
        restored = service.decompress_bytes(artifact)
        t2 = time.perf_counter()
    except HuffmanError as e:
        print(f" -> ❌ {e}")
        return {"name": name, "original_size": len(data), "success": False, "error": str(e)}

    success = restored == data
    stats = service.stats(data)
    print(f" -> {len(artifact)} bytes {'✅' if success else '❌'}")
    return {
        "name": name,
        "success": success,
        "original_size": len(data),
        "compressed_size": len(artifact),
        "packed_size": stats["packed_size"],
        "distinct_symbols": stats["distinct_symbols"],
        "ratio": stats["ratio"],
        "compress_seconds": round(t1 - t0, 6),
        "decompress_seconds": round(t2 - t1, 6),
    }


def run_evaluation(seed=1234, size=64 * 1024):
    """
    Run every sample through the codec.

    Returns dict with per-sample results and a summary.
    """
    print(f"\n{'=' * 60}")
    print("HUFFMAN CODEC EVALUATION")
    print(f"{'=' * 60}")

    service = HuffmanService()
    samples = [run_sample(service, name, data)
               for name, data in build_samples(seed, size).items()]

    passed = sum(1 for s in samples if s["success"])
    summary = {
        "total": len(samples),
        "passed": passed,
        "failed": len(samples) - passed,
    }
    print(f"\nResults: {passed}/{len(samples)} round trips matched")
    return {"samples": samples, "summary": summary}


def generate_output_path():
    """Generate output path in format: evaluation/YYYY-MM-DD/HH-MM-SS/report.json"""
    now = datetime.now()
    date_str = now.strftime("%Y-%m-%d")
    time_str = now.strftime("%H-%M-%S")

    output_dir = PROJECT_ROOT / "evaluation" / date_str / time_str
    output_dir.mkdir(parents=True, exist_ok=True)

    return output_dir / "report.json"


def main(argv=None):
    """Main entry point for evaluation."""
    import argparse

    parser = argparse.ArgumentParser(description="Benchmark the Huffman compressor")
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON file path (default: evaluation/YYYY-MM-DD/HH-MM-SS/report.json)"
    )
    parser.add_argument("--seed", type=int, default=1234, help="Seed for generated inputs")
    parser.add_argument("--size", type=int, default=64 * 1024, help="Size of generated inputs")

    args = parser.parse_args(argv)

    run_id = generate_run_id()
    started_at = datetime.now()

    print(f"Run ID: {run_id}")
    print(f"Started at: {started_at.isoformat()}")

    results = run_evaluation(args.seed, args.size)
    success = results["summary"]["failed"] == 0

    finished_at = datetime.now()
    duration = (finished_at - started_at).total_seconds()

    report = {
        "run_id": run_id,
        "started_at": started_at.isoformat(),
        "finished_at": finished_at.isoformat(),
        "duration_seconds": round(duration, 6),
        "success": success,
        "environment": get_environment_info(),
        "results": results,
    }

    output_path = Path(args.output) if args.output else generate_output_path()
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(report, f, indent=2)
    print(f"\n✅ Report saved to: {output_path}")
    print(f"Duration: {duration:.2f}s")
    print(f"Success: {'✅ YES' if success else '❌ NO'}")

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
