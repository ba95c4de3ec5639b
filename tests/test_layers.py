import pytest

from diuca.layers import LayeredMaterial, LayerError, LayerParameter, UniformLayer


def test_uniform_layer_with_ids():
    layer = UniformLayer([1.0, 2.0, 3.0], [7, 8, 9])
    assert layer.layer_id((0.5, 0.0, 0.0)) == 7
    assert layer.layer_id((1.5, 0.0, 0.0)) == 8
    assert layer.layer_id((2.5, 0.0, 0.0)) == 9


def test_interface_point_goes_to_next_layer():
    layer = UniformLayer([1.0, 2.0, 3.0], [7, 8, 9])
    assert layer.layer_id((1.0, 0.0, 0.0)) == 8


def test_default_ids_count_from_zero():
    layer = UniformLayer([1.0, 2.0, 3.0])
    found = [layer.layer_id((x, 0.0, 0.0)) for x in (0.5, 1.5, 2.5)]
    assert found == list(range(3))


def test_direction_is_normalized():
    layer = UniformLayer([1.0, 2.0], [5, 6], direction=(0.0, 2.0, 0.0))
    assert layer.layer_id((0.0, 1.5, 0.0)) == 6
    assert layer.layer_id((100.0, 0.5, 0.0)) == 5


def test_short_point_is_padded():
    layer = UniformLayer([1.0, 2.0], [5, 6])
    assert layer.layer_id((1.5,)) == layer.layer_id((1.5, 0.0, 0.0))


def test_zero_direction_raises():
    with pytest.raises(LayerError):
        UniformLayer([1.0], direction=(0.0, 0.0, 0.0))


def test_mismatched_ids_raise():
    with pytest.raises(LayerError):
        UniformLayer([1.0, 2.0], [1])


def test_point_beyond_last_interface_raises():
    layer = UniformLayer([1.0, 2.0], [5, 6])
    with pytest.raises(LayerError):
        layer.layer_id((2.5, 0.0, 0.0))


def test_layer_parameter_reinit():
    parameter = LayerParameter([10, 20, 30])
    parameter.resize(2)
    parameter.reinit(0, 2)
    parameter.reinit(1, 0)
    assert parameter.values() == (30, 10)


def test_layer_parameter_resize_keeps_values():
    parameter = LayerParameter(["a", "b"])
    parameter.resize(1)
    parameter.reinit(0, 1)
    parameter.resize(3)
    assert parameter.values()[0] == "b"
    assert len(parameter.values()) == 3


def test_layered_material_lookup():
    material = LayeredMaterial("soil", [3, 1], {"density": [2000.0, 1500.0]})
    density = material.get_layer_param("density")
    material.compute_properties([1.0, 3.0, 0.6])
    assert density.values() == (1500.0, 2000.0, 1500.0)
    assert material.layer_id.values() == (1, 3, 1)


def test_rounding_half_away_from_zero():
    material = LayeredMaterial("soil", [0, 1], {"kind": ["a", "b"]})
    kind = material.get_layer_param("kind")
    material.compute_properties([0.5, 1.49])
    assert kind.values() == ("b", "b")


def test_add_layer_vector():
    material = LayeredMaterial("soil", [2, 4], {})
    data = material.add_layer_vector(["low", "high"])
    material.compute_properties([4.0, 2.0])
    assert data.values() == ("high", "low")


def test_unknown_layer_id_raises():
    material = LayeredMaterial("soil", [3, 1], {"density": [2000.0, 1500.0]})
    material.get_layer_param("density")
    with pytest.raises(LayerError, match="soil"):
        material.compute_properties([2.0])


def test_layer_id_beyond_maximum_raises():
    material = LayeredMaterial("soil", [3, 1], {})
    with pytest.raises(LayerError):
        material.compute_properties([7.0])


def test_parameter_length_mismatch_raises():
    material = LayeredMaterial("soil", [3, 1], {"density": [2000.0]})
    with pytest.raises(LayerError):
        material.get_layer_param("density")


def test_add_layer_vector_length_mismatch_raises():
    material = LayeredMaterial("soil", [3, 1], {})
    with pytest.raises(LayerError):
        material.add_layer_vector([1.0, 2.0, 3.0])


def test_missing_parameter_raises():
    material = LayeredMaterial("soil", [3, 1], {})
    with pytest.raises(LayerError):
        material.get_layer_param("density")


def test_empty_layer_ids_raise():
    with pytest.raises(LayerError):
        LayeredMaterial("soil", [], {})