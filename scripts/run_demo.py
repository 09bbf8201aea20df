#!/usr/bin/env python
"""
Actor Scene Engine Demo Script

Runs the pre-render pipeline on a narration prompt: emotion analysis,
adjusted duration, gesture and emotion timelines, modifiers, music bed,
and the stored scene-configuration record.

Usage:
    python scripts/run_demo.py                          # Built-in sample prompts
    python scripts/run_demo.py --text "A dark storm"    # Your own prompt
    python scripts/run_demo.py --help                   # Show help
"""

import sys
import argparse
import logging
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger("ACTOR_DEMO")

SAMPLE_PROMPTS = [
    "I am terrified of the dark shadow creeping closer",
    "A calm peaceful sunrise with golden light",
    "An underwater coral reef teeming with colorful fish, gentle currents, "
    "and shimmering light from above",
    "The crowd erupts in a happy celebration, everyone dancing and laughing at the party",
]


def run_demo_pipeline(prompts, output_dir: Path, settings_path: Path, avatar_id: str = None):
    """Analyze each prompt and write its music bed and scene record."""
    from actor_core.config import ActorConfig
    from actor_core.providers import ProviderSettings
    from actor_core.scene_pipeline import ScenePipeline, SceneConfigRecord

    config = ActorConfig.from_env()
    config.output_dir = output_dir
    config.settings_path = settings_path
    config.ensure_dirs()
    config.configure_logging(str(output_dir / "actor_debug.log"))

    # stored selections override the ACTOR_* provider variables
    settings = ProviderSettings.load(settings_path) if settings_path.exists() else None
    pipeline = ScenePipeline(settings=settings, config=config)

    logger.info("=" * 60)
    logger.info("🎬 Actor Scene Engine Demo")
    logger.info("=" * 60)

    for index, text in enumerate(prompts):
        logger.info(f"\n📝 Scene {index}: {text[:60]}")
        scene = pipeline.analyze(text)
        analysis = scene.analysis

        logger.info(f"   Emotion: {analysis.emotion.value} ({analysis.intensity}), "
                    f"energy={analysis.energy.value}, mood={analysis.mood.value}")
        logger.info(f"   Duration: {scene.base_duration:.2f}s → {scene.duration:.2f}s")
        logger.info(f"   Lighting x{scene.visual.lighting * scene.visual.lighting_boost:.2f}, "
                    f"fog x{scene.visual.fog_density}")
        for cue in scene.emotion_timeline:
            logger.info(f"   😐 {cue.time:6.2f}s {cue.emotion} @ {cue.intensity:.2f}")
        for cue in scene.gesture_cues:
            logger.info(f"   🙋 {cue.time:6.2f}s {cue.gesture}")

        pipeline.render_music(scene, output_dir / "music" / f"scene_{index}.wav")

        record = SceneConfigRecord.from_scene(scene, avatar_id=avatar_id)
        record_path = output_dir / "scenes" / f"scene_{index}.json"
        record_path.parent.mkdir(parents=True, exist_ok=True)
        record_path.write_text(record.to_json(), encoding="utf-8")
        logger.info(f"   Saved scene config: {record_path}")

    logger.info("\n" + "=" * 60)
    logger.info("✅ Demo Complete!")
    logger.info("=" * 60)


def main():
    parser = argparse.ArgumentParser(
        description="Actor Scene Engine Demo Script",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python scripts/run_demo.py
    python scripts/run_demo.py --text "The monster attacks in a furious rage"
    python scripts/run_demo.py --output ./out --avatar avatar-42
        """
    )

    parser.add_argument(
        "--text",
        action="append",
        help="Narration prompt (repeatable; default: built-in samples)"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("./actor_output"),
        help="Output directory (default: ./actor_output)"
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Provider settings JSON (default: <output>/settings.json)"
    )
    parser.add_argument(
        "--avatar",
        default=None,
        help="Avatar id stored in the scene records"
    )

    args = parser.parse_args()
    settings_path = args.settings or args.output / "settings.json"

    try:
        run_demo_pipeline(args.text or SAMPLE_PROMPTS, args.output, settings_path, args.avatar)
        return 0

    except Exception as e:
        from actor_core.generation_errors import normalize_generation_error

        normalized = normalize_generation_error(e)
        logger.exception(f"❌ Demo failed: {normalized.summary} ({normalized.technical_hint})")
        return 1


if __name__ == "__main__":
    sys.exit(main())
