import os
import json
import logging
import click
from .audio import load_audio
from .chord import estimate_chord
from .config import CHORD_THRESHOLD, FMAX, FMIN


@click.command()
@click.argument("audio_path", type=click.Path(exists=True))
@click.option("--sr", type=int, default=None, help="Resample to this rate (default: native)")
@click.option("--offset", type=float, default=0.0, show_default=True, help="Start reading after this many seconds")
@click.option("--duration", type=float, default=None, help="Only analyse this many seconds")
@click.option("--threshold", type=float, default=CHORD_THRESHOLD, show_default=True, help="Minimum template score")
@click.option("--fmin", type=float, default=FMIN, show_default=True, help="Lowest analysed frequency (Hz)")
@click.option("--fmax", type=float, default=FMAX, show_default=True, help="Highest analysed frequency (Hz)")
@click.option("--json", "json_output", is_flag=True, help="Output JSON")
@click.option("--verbose", "-v", is_flag=True, help="Log analysis details")
def main(audio_path: str, sr, offset: float, duration, threshold: float, fmin: float, fmax: float,
         json_output: bool, verbose: bool):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    y, sr = load_audio(audio_path, sr=sr, mono=True, offset=offset, duration=duration)
    try:
        chord_res = estimate_chord(y, sr, fmin=fmin, fmax=fmax, threshold=threshold)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    result = {
        "file": os.path.basename(audio_path),
        "chord": chord_res["chord"],
        "score": float(chord_res["score"]),
        "top_pitch_classes": chord_res["top_pitch_classes"],
    }

    if json_output:
        print(json.dumps(result, indent=2))
    else:
        print(f"File: {result['file']}")
        print(f"Detected pitch classes: {', '.join(result['top_pitch_classes'])}")
        print(f"Chord: {result['chord']} (score {result['score']:.2f})")

    return result


if __name__ == "__main__":
    main()
