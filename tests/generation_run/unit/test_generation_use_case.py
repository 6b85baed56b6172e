"""Generation run use-case tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from descriptor_embedder.configuration import GeneratorOptions
from descriptor_embedder.descriptor_emission import EmissionOutcome
from descriptor_embedder.generation_run import (
    GenerationRequest,
    GenerationRunError,
    execute_generation_run,
    has_descriptor_methods,
    select_default_file_names,
)
from descriptor_embedder.naming import NameResolutionError
from descriptor_embedder.schema_model import SchemaFileDescription, link_schema_files
from google.protobuf import descriptor_pb2


def _write_descriptor_set(path: Path) -> Path:
    lite_options = descriptor_pb2.FileOptions(optimize_for=descriptor_pb2.FileOptions.LITE_RUNTIME)
    files = [
        descriptor_pb2.FileDescriptorProto(name="acme/common.proto", package="acme"),
        descriptor_pb2.FileDescriptorProto(
            name="acme/orders.proto", package="acme", dependency=["acme/common.proto"]
        ),
        descriptor_pb2.FileDescriptorProto(
            name="acme/mobile.proto",
            package="acme",
            dependency=["acme/common.proto"],
            options=lite_options,
        ),
    ]
    path.write_bytes(descriptor_pb2.FileDescriptorSet(file=files).SerializeToString())
    return path


def test_generates_root_files_with_their_imports_and_skips_lite_files(tmp_path: Path) -> None:
    descriptor_set = _write_descriptor_set(tmp_path / "schema.pb")

    outcome = execute_generation_run(
        GenerationRequest(descriptor_set_path=str(descriptor_set), output_dir=str(tmp_path / "gen"))
    )

    assert outcome.generated_files == ("acme/Common.java", "acme/Orders.java")
    assert outcome.skipped_file_names == ("acme/mobile.proto",)
    assert outcome.annotation_files == ()
    assert outcome.output_dir == (tmp_path / "gen").resolve()
    assert "acme.Common.getDescriptor()" in (tmp_path / "gen" / "acme" / "Orders.java").read_text(
        encoding="utf-8"
    )


def test_generates_explicitly_requested_files_with_configuration(tmp_path: Path) -> None:
    descriptor_set = _write_descriptor_set(tmp_path / "schema.pb")
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "generator:\n  annotate_output: true\n  namespace_style: prefixed\n", encoding="utf-8"
    )

    outcome = execute_generation_run(
        GenerationRequest(
            descriptor_set_path=str(descriptor_set),
            output_dir=str(tmp_path / "gen"),
            file_names=("acme/common.proto", "acme/orders.proto"),
            config_path=str(config_path),
        )
    )

    assert outcome.generated_files == (
        "com/google/protos/acme/Common.java",
        "com/google/protos/acme/Orders.java",
    )
    assert outcome.annotation_files == (
        "com/google/protos/acme/Common.java.pb.meta",
        "com/google/protos/acme/Orders.java.pb.meta",
    )


def test_unknown_requested_file_raises(tmp_path: Path) -> None:
    descriptor_set = _write_descriptor_set(tmp_path / "schema.pb")

    with pytest.raises(GenerationRunError, match="missing.proto"):
        execute_generation_run(
            GenerationRequest(
                descriptor_set_path=str(descriptor_set),
                output_dir=str(tmp_path / "gen"),
                file_names=("missing.proto",),
            )
        )


def test_invalid_configuration_raises(tmp_path: Path) -> None:
    descriptor_set = _write_descriptor_set(tmp_path / "schema.pb")
    config_path = tmp_path / "config.yaml"
    config_path.write_text("generator: []\n", encoding="utf-8")

    with pytest.raises(GenerationRunError, match="generator"):
        execute_generation_run(
            GenerationRequest(
                descriptor_set_path=str(descriptor_set),
                output_dir=str(tmp_path / "gen"),
                config_path=str(config_path),
            )
        )


def test_emission_failures_are_wrapped_with_the_file_name(tmp_path: Path) -> None:
    descriptor_set = _write_descriptor_set(tmp_path / "schema.pb")
    calls: list[str] = []

    def _failing_generator(schema_file: SchemaFileDescription, **kwargs) -> EmissionOutcome:
        calls.append(schema_file.name)
        raise NameResolutionError("bad package")

    with pytest.raises(GenerationRunError, match="acme/common.proto: bad package"):
        execute_generation_run(
            GenerationRequest(
                descriptor_set_path=str(descriptor_set),
                output_dir=str(tmp_path / "gen"),
            ),
            holder_generator=_failing_generator,
        )
    assert calls == ["acme/common.proto"]


def test_generator_receives_one_shared_resolver_per_run(tmp_path: Path) -> None:
    descriptor_set = _write_descriptor_set(tmp_path / "schema.pb")
    resolvers: list[object] = []

    def _recording_generator(schema_file: SchemaFileDescription, **kwargs) -> EmissionOutcome:
        resolvers.append(kwargs["resolver"])
        return EmissionOutcome(generated_files=(f"{schema_file.name}.java",))

    outcome = execute_generation_run(
        GenerationRequest(
            descriptor_set_path=str(descriptor_set),
            output_dir=str(tmp_path / "gen"),
            file_names=("acme/common.proto", "acme/orders.proto"),
        ),
        holder_generator=_recording_generator,
    )

    assert len(resolvers) == 2
    assert resolvers[0] is resolvers[1]
    assert outcome.generated_files == ("acme/common.proto.java", "acme/orders.proto.java")


def test_has_descriptor_methods_honours_lite_settings() -> None:
    regular = SchemaFileDescription(name="a.proto", package="")
    lite = SchemaFileDescription(name="b.proto", package="", optimize_for_lite=True)

    assert has_descriptor_methods(regular, GeneratorOptions()) is True
    assert has_descriptor_methods(lite, GeneratorOptions()) is False
    assert has_descriptor_methods(regular, GeneratorOptions(enforce_lite=True)) is False


def test_default_selection_follows_imports_and_leaves_out_runtime_files() -> None:
    schema_files = link_schema_files(
        [
            descriptor_pb2.FileDescriptorProto(name="google/protobuf/descriptor.proto"),
            descriptor_pb2.FileDescriptorProto(
                name="acme/options.proto", dependency=["google/protobuf/descriptor.proto"]
            ),
            descriptor_pb2.FileDescriptorProto(
                name="acme/billing.proto", dependency=["acme/options.proto"]
            ),
            descriptor_pb2.FileDescriptorProto(name="acme/audit.proto"),
        ]
    )

    assert select_default_file_names(schema_files) == (
        "acme/options.proto",
        "acme/billing.proto",
        "acme/audit.proto",
    )
