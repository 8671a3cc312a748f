"""Structured errors with codes, severities and remediation hints."""

from __future__ import annotations

import enum
from collections.abc import Iterable

ERR_UNMARSHAL_CODE = "meshkit-11159"
ERR_UNMARSHAL_INVALID_CODE = "meshkit-11160"
ERR_UNMARSHAL_SYNTAX_CODE = "meshkit-11161"
ERR_UNMARSHAL_TYPE_CODE = "meshkit-11162"
ERR_UNMARSHAL_UNSUPPORTED_TYPE_CODE = "meshkit-11163"
ERR_UNMARSHAL_UNSUPPORTED_VALUE_CODE = "meshkit-11164"
ERR_MARSHAL_CODE = "meshkit-11165"
ERR_GET_BOOL_CODE = "meshkit-11166"
ERR_INVALID_PROTOCOL_CODE = "meshkit-11167"
ERR_REMOTE_FILE_NOT_FOUND_CODE = "meshkit-11168"
ERR_READING_REMOTE_FILE_CODE = "meshkit-11169"
ERR_READING_LOCAL_FILE_CODE = "meshkit-11170"
ERR_READ_FILE_CODE = "meshkit-11171"
ERR_WRITE_FILE_CODE = "meshkit-11172"
ERR_GETTING_LATEST_RELEASE_TAG_CODE = "meshkit-11173"
ERR_MISSING_FIELD_CODE = "meshkit-11174"
ERR_EXPECTED_TYPE_MISMATCH_CODE = "meshkit-11175"
ERR_JSON_TO_CUE_CODE = "meshkit-11176"
ERR_YAML_TO_CUE_CODE = "meshkit-11177"
ERR_JSON_SCHEMA_TO_CUE_CODE = "meshkit-11178"
ERR_CUE_LOOKUP_CODE = "meshkit-11179"
ERR_TYPE_CAST_CODE = "meshkit-11180"
ERR_CREATE_FILE_CODE = "meshkit-11181"
ERR_CREATE_DIR_CODE = "meshkit-11182"
ERR_DECODE_YAML_CODE = "meshkit-11183"
ERR_EXTRACT_TAR_XZ_CODE = "meshkit-11184"
ERR_EXTRACT_ZIP_CODE = "meshkit-11185"
ERR_READ_DIR_CODE = "meshkit-11186"
ERR_INVALID_SCHEMA_VERSION_CODE = "replace_me"
ERR_FILE_WALK_DIR_CODE = "replace_me"
ERR_REL_PATH_CODE = "replace_me"
ERR_COPY_FILE_CODE = "replace_me"
ERR_CLOSE_FILE_CODE = "replace_me"
ERR_COMPRESS_TO_TAR_GZ_CODE = "meshkit-11248"

ERR_DRY_RUN_HELM_CHART_CODE = "meshkit-11187"
ERR_LOAD_HELM_CHART_CODE = "meshkit-11188"

ERR_GET_DESCRIBER_FUNC_CODE = "meshkit-11189"

ERR_CVRT_KOMPOSE_CODE = "meshkit-11229"
ERR_VALIDATE_DOCKER_COMPOSE_FILE_CODE = "meshkit-11230"
ERR_INCOMPATIBLE_VERSION_CODE = "meshkit-11231"
ERR_NO_VERSION_CODE = "meshkit-11232"


class Severity(enum.Enum):
    """How serious an error is."""

    ALERT = "alert"
    FATAL = "fatal"


class MeshKitError(Exception):
    """An error carrying a code, a severity and human-readable guidance."""

    def __init__(
        self,
        code: str,
        severity: Severity,
        short_description: Iterable[str] = (),
        long_description: Iterable[str] = (),
        probable_cause: Iterable[str] = (),
        suggested_remediation: Iterable[str] = (),
    ) -> None:
        self.code = code
        self.severity = severity
        self.short_description = list(short_description)
        self.long_description = list(long_description)
        self.probable_cause = list(probable_cause)
        self.suggested_remediation = list(suggested_remediation)
        super().__init__(self._message())

    def _message(self) -> str:
        short = " ".join(self.short_description)
        long = " ".join(self.long_description)
        return f"{short}: {long}" if long else short

    def __str__(self) -> str:
        return self._message()

    def __repr__(self) -> str:
        return f"MeshKitError(code={self.code!r}, message={self._message()!r})"


def _text(err: object) -> str:
    return str(err)


def _alert(code, short, long, cause, remedy) -> MeshKitError:
    return MeshKitError(code, Severity.ALERT, short, long, cause, remedy)


_VALID_JSON = ["Make sure to input a valid JSON object"]
_INVALID_FORMAT = ["Invalid object format"]
_PATH_CAUSES = ["invalid path provided", "insufficient permissions"]
_PATH_REMEDIES = [
    "provide a valid path",
    "retry by using an absolute path",
    "check for sufficient permissions for the user",
]


def err_invalid_protocol() -> MeshKitError:
    return _alert(
        ERR_INVALID_PROTOCOL_CODE,
        ["invalid protocol: only http, https and file are valid protocols"],
        [],
        ["Network protocol is incorrect"],
        ["Make sure to specify the right network protocol"],
    )


def err_extract_type() -> MeshKitError:
    return _alert(
        ERR_UNMARSHAL_TYPE_CODE,
        ["Invalid extraction type"],
        ["The file type to be extracted is neither `tar.gz` nor `zip`."],
        ["Invalid object format. The file is not of type `zip` or `tar.gz`."],
        ["Make sure to check that the file type is `zip` or `tar.gz`."],
    )


def err_invalid_schema_version() -> MeshKitError:
    return _alert(
        ERR_INVALID_SCHEMA_VERSION_CODE,
        ["Invalid schema version"],
        ["The `schemaVersion` key in the JSON file is either empty or has an incorrect value."],
        [
            "The JSON file schema is not of type 'relationship' or 'component'.",
            "The `schemaVersion` key in the JSON should be either `relationships.meshery.io` or `component.meshery.io`.",
        ],
        ["Verify that the `schemaVersion` key in the JSON has the correct value."],
    )


def err_cue_lookup(err) -> MeshKitError:
    return _alert(
        ERR_CUE_LOOKUP_CODE,
        ["Could not lookup the given path in the CUE value"],
        [_text(err)],
        [""],
        [
            "make sure that the path is a valid cue expression and is correct",
            "make sure that there exists a field with the given path",
            "make sure that the given root value is correct",
        ],
    )


def err_json_schema_to_cue(err) -> MeshKitError:
    return _alert(
        ERR_JSON_SCHEMA_TO_CUE_CODE,
        ["Could not convert given JsonSchema into a CUE Value"],
        [_text(err)],
        ["Invalid jsonschema"],
        ["Make sure that the given value is a valid JSONSCHEMA"],
    )


def err_yaml_to_cue(err) -> MeshKitError:
    return _alert(
        ERR_YAML_TO_CUE_CODE,
        ["Could not convert given yaml object into a CUE Value"],
        [_text(err)],
        ["Invalid yaml"],
        ["Make sure that the given value is a valid YAML"],
    )


def err_json_to_cue(err) -> MeshKitError:
    return _alert(
        ERR_JSON_TO_CUE_CODE,
        ["Could not convert given json object into a CUE Value"],
        [_text(err)],
        ["Invalid json object"],
        ["Make sure that the given value is a valid JSON"],
    )


def err_expected_type_mismatch(err, expected_type: str) -> MeshKitError:
    return _alert(
        ERR_EXPECTED_TYPE_MISMATCH_CODE,
        ["Expected the type to be: ", expected_type],
        [_text(err)],
        ["Invalid manifest"],
        ["Make sure that the value provided in the manifest has the needed type."],
    )


def err_missing_field(err, missing_field_name: str) -> MeshKitError:
    return _alert(
        ERR_MISSING_FIELD_CODE,
        ["Missing field or property with name: ", missing_field_name],
        [_text(err)],
        ["Invalid manifest"],
        ["Make sure that the concerned data type has all the required fields/values."],
    )


def err_unmarshal(err) -> MeshKitError:
    return _alert(
        ERR_UNMARSHAL_CODE,
        ["Unmarshal unknown error: "],
        [_text(err)],
        _INVALID_FORMAT,
        _VALID_JSON,
    )


def _type_name(typ) -> str:
    return typ.__name__ if isinstance(typ, type) else str(typ)


def err_unmarshal_invalid(err, typ) -> MeshKitError:
    return _alert(
        ERR_UNMARSHAL_INVALID_CODE,
        ["Unmarshal invalid error for type: ", _type_name(typ)],
        [_text(err)],
        _INVALID_FORMAT,
        _VALID_JSON,
    )


def err_unmarshal_syntax(err, offset: int) -> MeshKitError:
    return _alert(
        ERR_UNMARSHAL_SYNTAX_CODE,
        ["Unmarshal syntax error at offest: ", str(int(offset))],
        [_text(err)],
        _INVALID_FORMAT,
        _VALID_JSON,
    )


def err_unmarshal_type(err, value: str) -> MeshKitError:
    return _alert(
        ERR_UNMARSHAL_TYPE_CODE,
        ["Unmarshal type error at key: %s. Error: %s", value],
        [_text(err)],
        _INVALID_FORMAT,
        _VALID_JSON,
    )


def err_unmarshal_unsupported_type(err, typ) -> MeshKitError:
    return _alert(
        ERR_UNMARSHAL_UNSUPPORTED_TYPE_CODE,
        ["Unmarshal unsupported type error at key: ", _type_name(typ)],
        [_text(err)],
        _INVALID_FORMAT,
        _VALID_JSON,
    )


def err_unmarshal_unsupported_value(err, value) -> MeshKitError:
    return _alert(
        ERR_UNMARSHAL_UNSUPPORTED_VALUE_CODE,
        ["Unmarshal unsupported value error at key: ", str(value)],
        [_text(err)],
        _INVALID_FORMAT,
        _VALID_JSON,
    )


def err_marshal(err) -> MeshKitError:
    return _alert(
        ERR_MARSHAL_CODE,
        ["Marshal error, Description: %s"],
        [_text(err)],
        _INVALID_FORMAT,
        _VALID_JSON,
    )


def err_get_bool(key: str, err) -> MeshKitError:
    return _alert(
        ERR_GET_BOOL_CODE,
        ["Error while getting Boolean value for key: %s, error: %s", key],
        [_text(err)],
        ["Not a valid boolean"],
        ["Make sure it is a boolean"],
    )


def err_remote_file_not_found(url: str) -> MeshKitError:
    return _alert(
        ERR_REMOTE_FILE_NOT_FOUND_CODE,
        ["remote file not found at", url],
        [],
        ["File doesnt exist in the location", "File name is incorrect"],
        ["Make sure to input the right file name and location"],
    )


def err_reading_remote_file(err) -> MeshKitError:
    return _alert(
        ERR_READING_REMOTE_FILE_CODE,
        ["error reading remote file"],
        [_text(err)],
        ["File doesnt exist in the location", "File name is incorrect"],
        ["Make sure to input the right file name and location"],
    )


def err_reading_local_file(err) -> MeshKitError:
    return _alert(
        ERR_READING_LOCAL_FILE_CODE,
        ["error reading local file"],
        [_text(err)],
        [
            "File does not exist in the location (~/.kube/config)",
            "File is absent. Filename is not 'config'.",
            "Insufficient permissions to read file",
        ],
        [
            "Verify that the available kubeconfig is accessible by Meshery Server - "
            "verify sufficient file permissions (only needs read permission)."
        ],
    )


def err_read_file(err, filepath: str) -> MeshKitError:
    return _alert(
        ERR_READ_FILE_CODE,
        ["error reading file"],
        [_text(err)],
        [f"File does not exist in the location {filepath}", "Insufficient permissions"],
        ["Verify that file exist at the provided location", "Verify sufficient file permissions."],
    )


def err_write_file(err, filepath: str) -> MeshKitError:
    return _alert(
        ERR_WRITE_FILE_CODE,
        ["error writing file"],
        [_text(err)],
        [f"File does not exist in the location {filepath}", "Insufficient write permissions"],
        ["Verify that file exist at the provided location", "Verify sufficient file permissions."],
    )


def err_create_file(err, filepath: str) -> MeshKitError:
    return _alert(
        ERR_CREATE_FILE_CODE,
        [f"error creating file at {filepath}"],
        [_text(err)],
        _PATH_CAUSES,
        _PATH_REMEDIES,
    )


def err_create_dir(err, filepath: str) -> MeshKitError:
    return _alert(
        ERR_CREATE_DIR_CODE,
        [f"error creating directory at {filepath}"],
        [_text(err)],
        _PATH_CAUSES,
        _PATH_REMEDIES,
    )


def err_getting_latest_release_tag(err) -> MeshKitError:
    return _alert(
        ERR_GETTING_LATEST_RELEASE_TAG_CODE,
        ["Could not fetch latest stable release from github"],
        [_text(err)],
        [
            "Failed to make GET request to github",
            "Invalid response received on github.com/<org>/<repo>/releases/stable",
        ],
        [
            "Make sure Github is reachable",
            "Make sure a valid response is available on github.com/<org>/<repo>/releases/stable",
        ],
    )


def err_type_cast(err) -> MeshKitError:
    return _alert(
        ERR_TYPE_CAST_CODE,
        ["invaid type assertion requested"],
        [_text(err)],
        ["The interface type is not compatible with the request type cast"],
        ["use correct data type for type casting"],
    )


def err_decode_yaml(err) -> MeshKitError:
    return _alert(
        ERR_DECODE_YAML_CODE,
        ["Error occurred while decoding YAML"],
        [_text(err)],
        [],
        [],
    )


def err_compress_to_tar_gz(err, path: str) -> MeshKitError:
    return _alert(
        ERR_COMPRESS_TO_TAR_GZ_CODE,
        [f"Error while compressing file {path}"],
        [_text(err)],
        ["The file might be corrupt", "Insufficient permissions to read the file"],
        ["Verify sufficient read permissions"],
    )


def err_extract_tar_xz(err, path: str) -> MeshKitError:
    return _alert(
        ERR_EXTRACT_TAR_XZ_CODE,
        [f"Error while extracting file at {path}"],
        [_text(err)],
        ["The gzip might be corrupt"],
        [],
    )


def err_extract_zip(err, path: str) -> MeshKitError:
    return _alert(
        ERR_EXTRACT_ZIP_CODE,
        [f"Error while extracting file at {path}"],
        [_text(err)],
        ["The zip might be corrupt"],
        [],
    )


def err_read_dir(err, dir_path: str) -> MeshKitError:
    return _alert(
        ERR_READ_DIR_CODE,
        ["error reading directory"],
        [_text(err)],
        [f"Directory does not exist at the location {dir_path}", "Insufficient permissions"],
        [
            "Verify that directory exist at the provided location",
            "Verify sufficient directory read permission.",
        ],
    )


def err_file_walk_dir(err, path: str) -> MeshKitError:
    return _alert(
        ERR_FILE_WALK_DIR_CODE,
        ["Error while walking through directory"],
        [_text(err)],
        [f"The directory {path} does not exist."],
        ["Verify that the correct directory path is provided."],
    )


def err_rel_path(err, path: str) -> MeshKitError:
    return _alert(
        ERR_REL_PATH_CODE,
        ["Error determining relative path"],
        [_text(err)],
        [
            "The provided directory path is incorrect.",
            "The user might not have sufficient permission.",
        ],
        [
            "Verify the provided directory path is correct and if the user has sufficent permission."
        ],
    )


def err_copy_file(err) -> MeshKitError:
    return _alert(
        ERR_COPY_FILE_CODE,
        ["Error copying file"],
        [_text(err)],
        [
            "The file might not be accessible or the source and destination files are the same.",
            "The file might be corrupted.",
        ],
        [
            "Ensure the source and destination files are accessible and try again.",
            "Verify the integrity of the file and try again.",
        ],
    )


def err_close_file(err) -> MeshKitError:
    return _alert(
        ERR_CLOSE_FILE_CODE,
        ["Error closing file"],
        [_text(err)],
        [
            "Disk space might be full or the file might be corrupted.",
            "The user might not have sufficient permission.",
        ],
        ["Check for issues with file permissions or disk space and try again."],
    )


def err_dry_run_helm_chart(err, chart_name: str) -> MeshKitError:
    return _alert(
        ERR_DRY_RUN_HELM_CHART_CODE,
        [f"error dry running helm chart {chart_name}"],
        [_text(err)],
        ["the chart is corrupted", "template structure is not valid"],
        ["delete the chart and try again", "validate the chart and try again"],
    )


def err_load_helm_chart(err, path: str) -> MeshKitError:
    return _alert(
        ERR_LOAD_HELM_CHART_CODE,
        [f"error loading helm chart at {path}"],
        [_text(err)],
        [
            f"chart does not exist at the specified path {path}",
            "chart might have been deleted",
            "insufficient permissions to read the chart",
        ],
        [
            "provide correct path to the chart directory/file",
            "ensure sufficient/correct permission to the chart directory/file",
        ],
    )


def err_get_describer_func() -> MeshKitError:
    return MeshKitError(
        ERR_GET_DESCRIBER_FUNC_CODE,
        Severity.FATAL,
        ["Failed to get describer for the resource"],
        [
            "invalid kubernetes object type or object type not supported in meshkit",
            "Describer not found for the defined Resource",
        ],
    )


def err_cvrt_kompose(err) -> MeshKitError:
    return _alert(
        ERR_CVRT_KOMPOSE_CODE,
        ["Error converting the docker compose file into kubernetes manifests"],
        [_text(err)],
        ["Could not convert docker-compose file into kubernetes manifests"],
        ["Make sure the docker-compose file is valid", ""],
    )


def err_validate_docker_compose_file(err) -> MeshKitError:
    return _alert(
        ERR_VALIDATE_DOCKER_COMPOSE_FILE_CODE,
        ["Invalid docker compose file"],
        [_text(err)],
        [""],
        ["Make sure that the compose file is valid,", "Make sure that the schema is valid"],
    )


def err_incompatible_version() -> MeshKitError:
    return _alert(
        ERR_INCOMPATIBLE_VERSION_CODE,
        ["This version of docker compose file is not compatible."],
        ["This docker compose file is invalid since it's version is incompatible."],
        ["docker compose file with version greater than 3.3 is probably being used"],
        ["Make sure that the compose file has version less than or equal to 3.3,", ""],
    )


def err_no_version() -> MeshKitError:
    return _alert(
        ERR_NO_VERSION_CODE,
        ["version not found in the docker compose file"],
        ["Version field not found"],
        [
            "Since the Docker Compose specification does not mandate the version field "
            "from version 3 onwards, most sources do not provide them."
        ],
        [
            "Make sure that the compose file has version specified,",
            "Add any version less than or equal to 3.3 if you cannot get the exact version from the source",
        ],
    )