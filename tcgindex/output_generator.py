"""
TCGINDEX output generator to write out index artifacts & accessory methods
"""
import json
import logging
import os
import pathlib
import shutil
from typing import Any, Optional

from . import constants
from .compiled_classes import TcgStructuresObject
from .errors import ArtifactWriteError
from .index_builder import TcgIndexBundle
from .utils import get_file_hash

LOGGER = logging.getLogger(__name__)


def write_to_file(
    directory: pathlib.Path,
    file_name: str,
    file_contents: Any,
    pretty_print: bool,
    indent: Optional[int] = None,
) -> pathlib.Path:
    """
    Dump content to a JSON file
    :param directory: Directory to write into
    :param file_name: File to dump to (without extension)
    :param file_contents: Contents to dump
    :param pretty_print: Pretty or minimal
    :param indent: Indentation to force, regardless of pretty_print
    :return Path written
    """
    write_file = directory.joinpath(f"{file_name}.json")
    write_file.parent.mkdir(parents=True, exist_ok=True)

    if indent is None and pretty_print:
        indent = 4

    with write_file.open("w", encoding="utf-8") as file:
        json.dump(
            obj=file_contents,
            fp=file,
            indent=indent,
            ensure_ascii=False,
            default=lambda o: o.to_json(),
        )

    return write_file


def create_compiled_output(
    directory: pathlib.Path,
    compiled_name: str,
    compiled_object: Any,
    pretty_print: bool,
    indent: Optional[int] = None,
) -> None:
    """
    Log and write out a compiled output file
    :param directory: Directory to write into
    :param compiled_name: What file to save
    :param compiled_object: What content to write
    :param pretty_print: Pretty or minimal
    :param indent: Indentation to force, regardless of pretty_print
    """
    LOGGER.info(f"Generating {compiled_name}")
    try:
        write_to_file(directory, compiled_name, compiled_object, pretty_print, indent)
    except (OSError, TypeError, ValueError) as error:
        raise ArtifactWriteError(directory, str(error), f"{compiled_name}.json") from error
    LOGGER.debug(f"Finished Generating {compiled_name}")


def generate_output_file_hashes(directory: pathlib.Path) -> None:
    """
    Given a directory, hash each file within it and write that hash
    out to the file "FILENAME.HASH_NAME"
    :param directory: Directory to hash
    """
    for file in sorted(directory.glob("*")):
        if file.is_dir():
            continue

        # Don't hash the hash file...
        if file.name.endswith(constants.HASH_TO_GENERATE.name):
            continue

        generated_hash = get_file_hash(file)
        if not generated_hash:
            continue

        hash_file_name = f"{file.name}.{constants.HASH_TO_GENERATE.name}"
        with file.parent.joinpath(hash_file_name).open(
            "w", encoding="utf-8"
        ) as hash_file:
            hash_file.write(generated_hash)


def write_index_artifacts(
    directory: pathlib.Path, bundle: TcgIndexBundle, pretty_print: bool
) -> None:
    """
    Write the card lookup, the five indexes, then the metadata.
    Metadata goes last so it is always the newest file of a generation.
    :param directory: Directory to write into
    :param bundle: Built indexes
    :param pretty_print: Pretty or minimal
    """
    structures = TcgStructuresObject()

    for compiled_name, compiled_object in (
        (structures.card_lookup, bundle.card_lookup),
        (structures.name_index, bundle.name_index),
        (structures.set_index, bundle.set_index),
        (structures.type_index, bundle.type_index),
        (structures.rarity_index, bundle.rarity_index),
        (structures.supertype_index, bundle.supertype_index),
    ):
        create_compiled_output(directory, compiled_name, compiled_object, pretty_print)

    create_compiled_output(
        directory, structures.index_metadata, bundle.metadata, pretty_print, indent=2
    )


def publish_index_artifacts(
    output_path: pathlib.Path,
    bundle: TcgIndexBundle,
    pretty_print: bool = False,
    generate_hashes: bool = True,
) -> pathlib.Path:
    """
    Write a full artifact generation next to the output directory,
    then swap it in. Readers never see a mix of generations, but the
    directory is absent between the two renames of the swap. If anything
    fails before the swap, the previous generation is left untouched.
    :param output_path: Directory the artifacts are served from
    :param bundle: Built indexes
    :param pretty_print: Pretty or minimal
    :param generate_hashes: Write FILE.sha256 alongside each artifact
    :return Published directory
    """
    staging_path = output_path.with_name(
        f"{output_path.name}{constants.STAGING_DIR_SUFFIX}"
    )
    backup_path = output_path.with_name(
        f"{output_path.name}{constants.BACKUP_DIR_SUFFIX}"
    )

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        _remove_directory(staging_path)
        staging_path.mkdir()
    except OSError as error:
        raise ArtifactWriteError(
            staging_path, f"Unable to prepare staging directory: {error}"
        ) from error

    try:
        write_index_artifacts(staging_path, bundle, pretty_print)
        if generate_hashes:
            generate_output_file_hashes(staging_path)
    except ArtifactWriteError:
        LOGGER.error(f"Discarding partial index generation in {staging_path}")
        _remove_directory(staging_path)
        raise
    except OSError as error:
        LOGGER.error(f"Discarding partial index generation in {staging_path}")
        _remove_directory(staging_path)
        raise ArtifactWriteError(staging_path, str(error)) from error

    swap_generation(staging_path, output_path, backup_path)

    try:
        _remove_directory(backup_path)
    except OSError as error:
        LOGGER.warning(f"Unable to remove previous generation {backup_path}: {error}")

    LOGGER.info(f"Published search indexes to {output_path}")
    return output_path


def swap_generation(
    staging_path: pathlib.Path, output_path: pathlib.Path, backup_path: pathlib.Path
) -> None:
    """
    Move the live directory aside and the staged one into its place.
    If the second rename fails, the live directory is moved back;
    a failed move back is logged and the publish error still raised.
    :param staging_path: Fully written new generation
    :param output_path: Live directory
    :param backup_path: Where the live directory is parked during the swap
    """
    try:
        _remove_directory(backup_path)
        if output_path.exists():
            os.replace(output_path, backup_path)
    except OSError as error:
        raise ArtifactWriteError(
            output_path, f"Unable to move previous generation aside: {error}"
        ) from error

    try:
        os.replace(staging_path, output_path)
    except OSError as error:
        if backup_path.exists() and not output_path.exists():
            try:
                os.replace(backup_path, output_path)
            except OSError as rollback_error:
                LOGGER.error(
                    f"Unable to restore previous generation from {backup_path}: "
                    f"{rollback_error}"
                )
        raise ArtifactWriteError(
            output_path, f"Unable to publish index generation: {error}"
        ) from error


def _remove_directory(directory: pathlib.Path) -> None:
    if directory.is_dir():
        shutil.rmtree(directory)
    elif directory.exists():
        directory.unlink()
