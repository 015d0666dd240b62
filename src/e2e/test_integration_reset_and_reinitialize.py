import pytest
from wordpredict import ModelState, NotInitializedError, PredictionModel


@pytest.mark.e2e
def test_reset_is_idempotent_and_rebuild_is_identical(pack_root):
    model = PredictionModel(root=pack_root)
    model.initialize()
    first = model._data

    model.reset()
    assert model.state is ModelState.UNINITIALIZED
    model.reset()
    assert not model.is_initialized()
    with pytest.raises(NotInitializedError):
        model.complete("ca")

    model.initialize()
    assert model._data == first
    assert model.predict_next("cat") == ["sat", "ran"]


@pytest.mark.e2e
def test_reset_on_fresh_model(pack_root):
    model = PredictionModel(root=pack_root)
    model.reset()
    model.initialize()
    assert model.is_initialized()


@pytest.mark.e2e
def test_reset_clears_metrics(pack_root):
    model = PredictionModel(root=pack_root)
    model.initialize()
    assert model.get_metrics().data_stats.unique_words_count == 4
    model.reset()
    assert model.get_metrics().data_stats.unique_words_count == 0
