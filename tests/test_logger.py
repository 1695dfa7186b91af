import csv
import json
import os
import pathlib
import subprocess
import sys

import numpy as np

from nnchain import RunLogger, backend
from nnchain.helpers.stats import layer_stats

ROOT = pathlib.Path(__file__).resolve().parent.parent


def test_layer_stats_for_parameter_free_layer(chain):
    stats = layer_stats(chain.head())
    assert stats == {
        "weight_norm": 0.0,
        "bias_norm": 0.0,
        "hessian_mean": 0.0,
        "hessian_max": 0.0,
    }


def test_layer_stats_values(chain):
    _, l1, _ = chain
    l1.weight_hessian[...] = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    l1.bias_hessian[...] = [0.0, 0.0]
    stats = layer_stats(l1)
    np.testing.assert_allclose(stats["weight_norm"], np.linalg.norm(backend.to_cpu(l1.weight)), rtol=1e-6)
    np.testing.assert_allclose(stats["hessian_mean"], 21.0 / 8)
    assert stats["hessian_max"] == 6.0


def test_log_epoch_writes_csv(tmp_path):
    logger = RunLogger(root=tmp_path, tag="unit")
    logger.log_epoch(1, loss=0.5)
    logger.log_epoch(2, loss=0.25)
    assert logger.dir.parent == pathlib.Path(tmp_path)
    with open(logger.csv_path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["loss"] for r in rows] == ["0.5", "0.25"]
    assert [r["epoch"] for r in rows] == ["1", "2"]


def test_log_layers_and_json(tmp_path, chain):
    logger = RunLogger(root=tmp_path, tag="unit")
    chain.calc_hessian([np.array([1.0, 2.0, 3.0])])
    row = logger.log_layers(1, chain, loss=1.0)
    assert "L0_hessian_mean" in row
    assert "L2_weight_norm" in row
    assert row["loss"] == 1.0
    path = logger.save_json()
    with open(path) as f:
        saved = json.load(f)
    assert saved[0]["epoch"] == 1
    assert saved[0]["L2_hessian_mean"] == row["L2_hessian_mean"]


def test_plot_hessian_writes_png(tmp_path, chain):
    logger = RunLogger(root=tmp_path, tag="unit")
    for epoch, x in enumerate([[1.0, 0.0, 0.0], [0.0, 2.0, 1.0]], start=1):
        chain.calc_hessian([np.array(x)])
        logger.log_layers(epoch, chain)
    path = pathlib.Path(logger.plot_hessian())
    assert path.exists()
    assert path.name == "hessian_unit.png"


def test_importing_the_package_does_not_load_pyplot():
    code = (
        "import sys, nnchain\n"
        "layers = nnchain.Layers()\n"
        "layers.add(nnchain.FullyConnectedLayer(2, 1))\n"
        "layers.summary(verbose=False)\n"
        "sys.exit(1 if 'matplotlib.pyplot' in sys.modules else 0)\n"
    )
    env = dict(os.environ, NNCHAIN_USE_GPU="0")
    result = subprocess.run([sys.executable, "-c", code], env=env, cwd=ROOT)
    assert result.returncode == 0
