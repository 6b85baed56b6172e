"""Descriptor holder emission service.

The serialized schema file is embedded as string literals rather than a byte
array: a Java byte array initializer compiles to one store instruction per
element and quickly exceeds the method size limit, while string constants are
stored raw in the constant pool. Each constant is limited to 64k, hence the
grouping of literal lines into separate array elements.
"""

from __future__ import annotations

from collections.abc import Sequence

from descriptor_embedder.chunk_encoding.chunk_encoder import ChunkGroup, encode_chunks
from descriptor_embedder.configuration.generator_settings import GeneratorOptions
from descriptor_embedder.naming.name_resolver import NameResolver
from descriptor_embedder.payload_serialization.payload_serializer import serialize_payload
from descriptor_embedder.schema_model.schema_models import (
    DependencyReference,
    SchemaFileDescription,
)
from descriptor_embedder.text_emission.annotation_collector import AnnotationCollector
from descriptor_embedder.text_emission.code_printer import CodePrinter
from descriptor_embedder.text_emission.output_directory import OutputDirectory

from .emission_outcomes import EmissionOutcome, PreparedDescriptorHolder

FILE_DESCRIPTOR_TYPE = "com.google.protobuf.Descriptors.FileDescriptor"


def generate_descriptor_holder(
    schema_file: SchemaFileDescription,
    *,
    resolver: NameResolver,
    options: GeneratorOptions,
    output_directory: OutputDirectory,
) -> EmissionOutcome:
    """Write the descriptor holder source file for `schema_file`.

    Serialization and name resolution complete before any file is opened, so a
    failure in either leaves the output directory untouched. Errors raised
    while writing propagate unchanged; opened files are always closed.
    """
    prepared = prepare_descriptor_holder(schema_file, resolver=resolver, options=options)
    annotation_collector = AnnotationCollector() if options.annotate_output else None

    with output_directory.open(prepared.java_file_path) as stream:
        printer = CodePrinter(stream, annotation_collector=annotation_collector)
        _print_holder_file(printer, prepared, options)

    if annotation_collector is None:
        return EmissionOutcome(generated_files=(prepared.java_file_path,))

    with output_directory.open(prepared.annotation_file_path) as stream:
        stream.write(annotation_collector.serialize())
    return EmissionOutcome(
        generated_files=(prepared.java_file_path,),
        annotation_files=(prepared.annotation_file_path,),
    )


def prepare_descriptor_holder(
    schema_file: SchemaFileDescription,
    *,
    resolver: NameResolver,
    options: GeneratorOptions,
) -> PreparedDescriptorHolder:
    """Serialize, encode and resolve names for one schema file without writing anything."""
    payload = serialize_payload(
        schema_file, strip_nonfunctional_content=options.strip_nonfunctional_content
    )
    return PreparedDescriptorHolder(
        source_file_name=schema_file.name,
        holder_name=resolver.holder_type_name(schema_file),
        namespace=resolver.namespace(schema_file),
        chunk_groups=encode_chunks(payload, options.bytes_per_line, options.lines_per_group),
        dependency_references=resolve_dependency_references(schema_file, resolver),
    )


def resolve_dependency_references(
    schema_file: SchemaFileDescription, resolver: NameResolver
) -> tuple[DependencyReference, ...]:
    """Resolve dependencies in declaration order; the runtime matches them by position."""
    return tuple(
        resolver.dependency_reference(dependency) for dependency in schema_file.dependencies
    )


def emit_descriptor_block(
    printer: CodePrinter,
    chunk_groups: Sequence[ChunkGroup],
    dependency_references: Sequence[DependencyReference],
    *,
    restricted_runtime_mode: bool,
) -> None:
    """Print the literal array and the call that rebuilds the descriptor from it."""
    printer.print("java.lang.String[] descriptorData = {\n")
    printer.indent()
    for group_index, group in enumerate(chunk_groups):
        for chunk_index, chunk in enumerate(group.chunks):
            if chunk_index > 0:
                printer.print(" +\n")
            elif group_index > 0:
                printer.print(",\n")
            printer.print('"$data$"', {"data": chunk})
    printer.outdent()
    printer.print("\n};\n")

    if restricted_runtime_mode:
        printer.print(
            "descriptor = $file_descriptor$\n"
            "  .internalBuildGeneratedFileFrom(descriptorData);\n",
            {"file_descriptor": FILE_DESCRIPTOR_TYPE},
        )
        return

    printer.print(
        "descriptor = $file_descriptor$\n"
        "  .internalBuildGeneratedFileFrom(descriptorData,\n"
        "    new $file_descriptor$[] {\n",
        {"file_descriptor": FILE_DESCRIPTOR_TYPE},
    )
    for reference in dependency_references:
        printer.print(
            "      $dependency$.getDescriptor(),\n",
            {"dependency": reference.qualified_holder_name},
        )
    printer.print("    });\n")


def _print_holder_file(
    printer: CodePrinter, prepared: PreparedDescriptorHolder, options: GeneratorOptions
) -> None:
    printer.print(
        "// Generated by the protocol buffer compiler.  DO NOT EDIT!\n"
        "// NO CHECKED-IN PROTOBUF GENCODE\n"
        "// source: $filename$\n",
        {"filename": prepared.source_file_name},
    )
    if not options.restricted_runtime_mode:
        printer.print(
            "// Protobuf Java Version: $version$\n",
            {"version": str(options.gencode_version)},
        )
    printer.print("\n")
    if prepared.namespace:
        printer.print("package $package$;\n\n", {"package": prepared.namespace})
    if options.annotate_output:
        printer.print(
            '@javax.annotation.Generated(value="protoc", comments="annotations:$file$")\n',
            {"file": prepared.annotation_relative_path},
        )

    printer.print(
        "public final class $classname$ {\n"
        "  /* This variable is to be called by generated code only. It returns\n"
        "  * an incomplete descriptor for internal use only. */\n"
        "  public static $file_descriptor$\n"
        "      descriptor;\n",
        {"classname": prepared.holder_name, "file_descriptor": FILE_DESCRIPTOR_TYPE},
    )
    printer.annotate("classname", prepared.source_file_name)

    printer.print("  static {\n")
    printer.indent()
    printer.indent()
    emit_descriptor_block(
        printer,
        prepared.chunk_groups,
        prepared.dependency_references,
        restricted_runtime_mode=options.restricted_runtime_mode,
    )
    if not options.restricted_runtime_mode:
        _print_gencode_version_validator(printer, prepared.holder_name, options)
    printer.outdent()
    printer.outdent()
    printer.print(
        "  }\n"
        "\n"
        "  public static $file_descriptor$\n"
        "      getDescriptor() {\n"
        "    return descriptor;\n"
        "  }\n"
        "}\n",
        {"file_descriptor": FILE_DESCRIPTOR_TYPE},
    )


def _print_gencode_version_validator(
    printer: CodePrinter, holder_name: str, options: GeneratorOptions
) -> None:
    version = options.gencode_version
    printer.print(
        "com.google.protobuf.RuntimeVersion.validateProtobufGencodeVersion(\n"
        "  com.google.protobuf.RuntimeVersion.RuntimeDomain.PUBLIC,\n"
        "  /* major= */ $major$,\n"
        "  /* minor= */ $minor$,\n"
        "  /* patch= */ $patch$,\n"
        '  /* suffix= */ "$suffix$",\n'
        '  "$location$");\n',
        {
            "major": str(version.major),
            "minor": str(version.minor),
            "patch": str(version.patch),
            "suffix": version.suffix,
            "location": holder_name,
        },
    )
