from __future__ import annotations


def test_top_level_exports() -> None:
    import ekeys

    assert ekeys.Animation is not None
    assert ekeys.animate is not None
    assert ekeys.make_easing is not None
    assert ekeys.Keyframe is not None
    assert ekeys.EKeysClient is not None
    assert ekeys.run is not None
    assert isinstance(ekeys.__version__, str)
    for name in ekeys.__all__:
        assert hasattr(ekeys, name), name


def test_package_paths_work() -> None:
    from ekeys.api import create_api_app
    from ekeys.api.parsing import parse_evaluate_body, parse_sample_body
    from ekeys.api.routes import mount_keyframes_api
    from ekeys.api.serializers import keyframe_to_dict, value_to_json
    from ekeys.core import Animation, locate, make_easing, normalize_keyframes
    from ekeys.runtime import EKeysServer, app, create_app, run
    from ekeys.sdk import EKeysClient

    assert create_api_app is not None
    assert parse_evaluate_body is not None
    assert parse_sample_body is not None
    assert mount_keyframes_api is not None
    assert keyframe_to_dict is not None
    assert value_to_json is not None
    assert Animation is not None
    assert locate is not None
    assert make_easing is not None
    assert normalize_keyframes is not None
    assert EKeysServer is not None
    assert app is not None
    assert create_app is not None
    assert run is not None
    assert EKeysClient is not None


def test_errors_share_a_base_and_builtin_types() -> None:
    from ekeys import (
        DimensionMismatchError,
        EKeysError,
        InvalidRangeError,
        MissingArgumentError,
        TypeMismatchError,
        UnknownFieldError,
        UnknownPresetError,
    )

    for err in (
        DimensionMismatchError,
        InvalidRangeError,
        MissingArgumentError,
        TypeMismatchError,
        UnknownFieldError,
        UnknownPresetError,
    ):
        assert issubclass(err, EKeysError)
    assert issubclass(TypeMismatchError, TypeError)
    assert issubclass(MissingArgumentError, ValueError)
    assert issubclass(UnknownPresetError, KeyError)
