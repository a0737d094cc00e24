"""Command line entry point for the sign image library."""

import argparse
import asyncio
import os
import sys
from typing import List

from .analysis.color_classifier import COLOR_CODES, categorize_color, color_label
from .analysis.color_sampler import DominantColorSampler, SamplingError
from .core.config import LibraryConfig
from .library import ImageLibrary
from .pipeline.commit import CommitPipeline
from .pipeline.models import SourceFile
from .pipeline.previews import PreviewRegistry
from .pipeline.session import BulkUploadSession
from .pipeline.staging import StagingPipeline
from .storage.base_storage import BaseStorage, StorageError
from .storage.json_storage import JSONStorage
from .storage.local_storage import LocalStorage
from .storage.supabase_storage import SupabaseStorage


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Sign image library tools',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sign-library upload icons/*.png                 # Stage, preview, confirm, upload
  sign-library upload icons/*.png --yes           # Upload without asking
  sign-library upload icons/ --local-dir out/     # Dry run into a local folder
  sign-library library --color R                  # List red library icons
  sign-library classify stop.png                  # Show detected color only
        """
    )
    parser.add_argument(
        '--algorithm',
        type=str,
        default=None,
        choices=['sqrt', 'simple', 'dominant'],
        help='Color sampling algorithm (default: sqrt)'
    )
    parser.add_argument(
        '--local-dir',
        type=str,
        default=None,
        help='Use a local directory instead of Supabase Storage'
    )

    # Also accepted after the subcommand; SUPPRESS keeps a value given before it
    storage_options = argparse.ArgumentParser(add_help=False)
    storage_options.add_argument(
        '--local-dir',
        type=str,
        default=argparse.SUPPRESS,
        help='Use a local directory instead of Supabase Storage'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    upload = subparsers.add_parser('upload', parents=[storage_options], help='Bulk upload images to the library')
    upload.add_argument('paths', nargs='+', help='Image files or directories')
    upload.add_argument('--yes', '-y', action='store_true', help='Skip the confirmation prompt')
    upload.add_argument('--report', type=str, default=None, help='Report filename (default: upload_report.json)')

    library = subparsers.add_parser('library', parents=[storage_options], help='List library images')
    library.add_argument('--color', type=str, default='ALL', choices=['ALL', *COLOR_CODES], help='Color filter')
    library.add_argument('--search', type=str, default=None, help='File name search')
    library.add_argument('--sort', type=str, default='name-asc', choices=['name-asc', 'name-desc'])

    classify = subparsers.add_parser('classify', help='Detect colors without uploading')
    classify.add_argument('paths', nargs='+', help='Image files or directories')

    return parser


def collect_files(paths: List[str]) -> List[SourceFile]:
    """Expand directories (sorted by name) and read every file.

    Missing or unreadable paths are reported and skipped.
    """
    candidates = []
    for path in paths:
        if os.path.isdir(path):
            for name in sorted(os.listdir(path)):
                full_path = os.path.join(path, name)
                if os.path.isfile(full_path):
                    candidates.append(full_path)
        else:
            candidates.append(path)

    files = []
    for path in candidates:
        try:
            files.append(SourceFile.from_path(path))
        except OSError as e:
            print(f"  ⚠ Cannot read {path}: {e.strerror or e}")
    return files


def build_storage(config: LibraryConfig, local_dir: str = None) -> BaseStorage:
    if local_dir:
        return LocalStorage(local_dir)

    if not config.validate():
        raise ValueError("Supabase credentials required (or pass --local-dir)")

    return SupabaseStorage(
        bucket=config.bucket,
        url=config.supabase_url,
        key=config.supabase_key
    )


def build_sampler(config: LibraryConfig) -> DominantColorSampler:
    return DominantColorSampler(
        algorithm=config.sample_algorithm,
        step=config.sample_step,
        max_dimension=config.max_dimension
    )


async def run_upload(args, config: LibraryConfig) -> int:
    storage = build_storage(config, args.local_dir)
    session = BulkUploadSession(
        StagingPipeline(
            build_sampler(config),
            PreviewRegistry(),
            concurrency=config.staging_concurrency
        ),
        CommitPipeline(storage, config.library_prefix)
    )

    files = collect_files(args.paths)
    print(f"\n🎨 Analyzing {len(files)} file(s)...\n")
    result = await session.stage(files)

    print(f"\n{'='*80}")
    print("UPLOAD PREVIEW")
    print(f"{'='*80}")
    for asset in result.staged:
        print(f"  {asset.original_name:<40} → {asset.assigned_name:<12} ({color_label(asset.color_code)})")
    print(f"\n  Ready:          {len(result.staged)}")
    print(f"  Not an image:   {result.skipped_count}")
    print(f"  Decode failed:  {len(result.failures)}")
    for failure in result.failures:
        print(f"    • {failure.file_name}: {failure.reason}")

    if not result.staged:
        session.cancel()
        print("\n❌ Nothing to upload.")
        return 1

    if not args.yes:
        answer = input(f"\nUpload {len(result.staged)} image(s) to the library? [y/N] ")
        if answer.strip().lower() not in ('y', 'yes'):
            session.cancel()
            print("Upload cancelled.")
            return 0

    commit_result = await session.confirm()

    if args.report:
        config.report_filename = args.report
    JSONStorage.save(commit_result.to_dict(), config.full_report_path)

    print(f"\n✅ Successfully uploaded {commit_result.succeeded_count} images to library!")
    if commit_result.failed:
        print(f"⚠ {commit_result.failed_count} upload(s) failed:")
        for failure in commit_result.failed:
            print(f"    • {failure.original_name} ({failure.final_name}): {failure.reason}")
        return 2

    return 0


def run_library(args, config: LibraryConfig) -> int:
    library = ImageLibrary(build_storage(config, args.local_dir), config.library_prefix)
    images = library.list_images(color=args.color, search=args.search, sort=args.sort)

    for image in images:
        print(f"  {image.name:<16} {image.url}")
    print(f"\n{len(images)} image(s)")
    return 0


def run_classify(args, config: LibraryConfig) -> int:
    sampler = build_sampler(config)
    for file in collect_files(args.paths):
        if not file.is_image:
            print(f"  ⚠ {file.name}: Not an image")
            continue
        try:
            rgb = sampler.sample_bytes(file.content)
        except SamplingError as e:
            print(f"  ⚠ {file.name}: {e}")
            continue
        code = categorize_color(*rgb)
        print(f"  {file.name:<40} rgb{rgb} → {code} ({color_label(code)})")
    return 0


def main(argv: List[str] = None) -> int:
    """Main function to run the CLI."""
    args = build_parser().parse_args(argv)

    config = LibraryConfig()
    if args.algorithm:
        config.sample_algorithm = args.algorithm

    try:
        if args.command == 'upload':
            return asyncio.run(run_upload(args, config))
        if args.command == 'library':
            return run_library(args, config)
        return run_classify(args, config)
    except (ValueError, StorageError, OSError) as e:
        print(f"❌ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
