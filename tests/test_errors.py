import pytest

from meshkitutils import errors
from meshkitutils.errors import MeshKitError, Severity


def test_read_file_error_carries_code_cause_and_path():
    err = errors.err_read_file(OSError("no such file"), "/tmp/a.yaml")
    assert err.code == "meshkit-11171"
    assert err.severity is Severity.ALERT
    assert err.long_description == ["no such file"]
    assert "File does not exist in the location /tmp/a.yaml" in err.probable_cause


def test_error_is_raisable_and_message_contains_parts():
    err = errors.err_unmarshal(ValueError("bad json"))
    assert err.code == "meshkit-11159"
    message = str(err)
    assert "bad json" in message
    assert "Unmarshal unknown error" in message
    with pytest.raises(MeshKitError) as info:
        raise err
    assert info.value.code == "meshkit-11159"
    assert str(info.value) == message


def test_extract_type_reuses_unmarshal_type_code():
    assert errors.err_extract_type().code == errors.err_unmarshal_type(ValueError("x"), "k").code


def test_describer_error_is_fatal_with_empty_guidance():
    err = errors.err_get_describer_func()
    assert err.code == "meshkit-11189"
    assert err.severity is Severity.FATAL
    assert err.probable_cause == []
    assert err.suggested_remediation == []


def test_unmarshal_syntax_includes_offset():
    err = errors.err_unmarshal_syntax(ValueError("oops"), 42)
    assert err.short_description[1] == "42"
    assert err.code == "meshkit-11161"


def test_unmarshal_invalid_uses_type_name():
    err = errors.err_unmarshal_invalid(ValueError("oops"), dict)
    assert err.short_description == ["Unmarshal invalid error for type: ", "dict"]


def test_create_dir_mentions_path():
    err = errors.err_create_dir(PermissionError("denied"), "/opt/data")
    assert err.short_description == ["error creating directory at /opt/data"]
    assert err.code == "meshkit-11182"


def test_load_helm_chart_mentions_path_twice():
    err = errors.err_load_helm_chart(OSError("gone"), "charts/app")
    assert err.short_description == ["error loading helm chart at charts/app"]
    assert err.probable_cause[0] == "chart does not exist at the specified path charts/app"
    assert err.code == "meshkit-11188"


def test_kompose_errors_codes():
    assert errors.err_cvrt_kompose(RuntimeError("x")).code == "meshkit-11229"
    assert errors.err_validate_docker_compose_file(RuntimeError("x")).code == "meshkit-11230"
    assert errors.err_incompatible_version().code == "meshkit-11231"
    assert errors.err_no_version().code == "meshkit-11232"


def test_remote_file_not_found_has_no_long_description():
    err = errors.err_remote_file_not_found("http://example.com/f")
    assert err.long_description == []
    assert err.short_description == ["remote file not found at", "http://example.com/f"]


@pytest.mark.parametrize(
    "factory",
    [
        errors.err_file_walk_dir,
        errors.err_rel_path,
    ],
)
def test_placeholder_code_errors_with_path(factory):
    err = factory(OSError("fail"), "some/dir")
    assert err.code == "replace_me"
    assert err.long_description == ["fail"]


@pytest.mark.parametrize(
    "factory, code",
    [
        (errors.err_cue_lookup, "meshkit-11179"),
        (errors.err_json_schema_to_cue, "meshkit-11178"),
        (errors.err_yaml_to_cue, "meshkit-11177"),
        (errors.err_json_to_cue, "meshkit-11176"),
        (errors.err_marshal, "meshkit-11165"),
        (errors.err_reading_remote_file, "meshkit-11169"),
        (errors.err_reading_local_file, "meshkit-11170"),
        (errors.err_getting_latest_release_tag, "meshkit-11173"),
        (errors.err_type_cast, "meshkit-11180"),
        (errors.err_decode_yaml, "meshkit-11183"),
        (errors.err_copy_file, "replace_me"),
        (errors.err_close_file, "replace_me"),
    ],
)
def test_single_argument_factories(factory, code):
    err = factory(RuntimeError("underlying"))
    assert err.code == code
    assert err.long_description == ["underlying"]


def test_constant_style_errors():
    assert errors.err_invalid_protocol().code == "meshkit-11167"
    assert errors.err_invalid_schema_version().code == "replace_me"


def test_two_argument_factories_keep_extra_value():
    assert errors.err_expected_type_mismatch(ValueError("e"), "float").short_description[1] == "float"
    assert errors.err_missing_field(ValueError("e"), "name").short_description[1] == "name"
    assert errors.err_get_bool("flag", ValueError("e")).short_description[1] == "flag"
    assert errors.err_unmarshal_unsupported_value(ValueError("e"), 7).short_description[1] == "7"
    assert errors.err_unmarshal_unsupported_type(ValueError("e"), list).short_description[1] == "list"


def test_path_factories_embed_path():
    assert errors.err_write_file(OSError("e"), "out.txt").probable_cause[0].endswith("out.txt")
    assert errors.err_create_file(OSError("e"), "f.txt").short_description[0].endswith("f.txt")
    assert errors.err_compress_to_tar_gz(OSError("e"), "a").short_description[0].endswith(" a")
    assert errors.err_extract_tar_xz(OSError("e"), "b.tgz").short_description[0].endswith("b.tgz")
    assert errors.err_extract_zip(OSError("e"), "c.zip").short_description[0].endswith("c.zip")
    assert errors.err_read_dir(OSError("e"), "d").probable_cause[0].endswith(" d")
    assert errors.err_dry_run_helm_chart(OSError("e"), "mychart").short_description[0].endswith("mychart")