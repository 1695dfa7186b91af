# nnchain/helpers/logger.py
import csv, json, datetime, pathlib

from .stats import layer_stats


class RunLogger:
    def __init__(self, root="runs", tag="run"):
        ts = datetime.datetime.now().strftime("%Y%m%d-%H%M%S")
        self.root = pathlib.Path(root)
        self.dir = self.root / f"{tag}_{ts}"
        self.dir.mkdir(parents=True, exist_ok=True)
        self.tag = tag
        self.csv_path = self.dir / "history.csv"
        self.json_path = self.dir / "history.json"
        self.metrics = []  # list of dicts per epoch
        self._csv_fields = None

    # ---------- logging ----------
    def log_epoch(self, epoch, **kwargs):
        row = {"epoch": int(epoch), **{k: float(v) for k, v in kwargs.items()}}
        self.metrics.append(row)
        with open(self.csv_path, "a", newline="") as f:
            if self._csv_fields is None:
                self._csv_fields = list(row.keys())
                writer = csv.DictWriter(f, fieldnames=self._csv_fields, extrasaction="ignore")
                writer.writeheader()
            else:
                writer = csv.DictWriter(f, fieldnames=self._csv_fields, extrasaction="ignore")
            writer.writerow(row)
        return row

    def log_layers(self, epoch, layers, **kwargs):
        """
        Record layer_stats() of every layer in a chain as one epoch row,
        keyed L<index>_<stat>. Extra metrics can be passed as keywords.
        """
        stats = {}
        for i, layer in enumerate(layers):
            for k, v in layer_stats(layer).items():
                stats[f"L{i}_{k}"] = v
        stats.update(kwargs)
        return self.log_epoch(epoch, **stats)

    def save_json(self):
        with open(self.json_path, "w") as f:
            json.dump(self.metrics, f, indent=2)
        return str(self.json_path)

    # ---------- plotting ----------
    def _plots_dir(self, subdir):
        out = self.dir / subdir
        out.mkdir(parents=True, exist_ok=True)
        return out

    def plot_hessian(self, subdir="plots"):
        """
        Saves the per-layer mean Hessian curve as hessian_<tag>.png.
        Only layers recorded through log_layers() appear.
        """
        import matplotlib.pyplot as plt

        keys = []
        for row in self.metrics:
            for k in row:
                if k.endswith("_hessian_mean") and k not in keys:
                    keys.append(k)

        outdir = self._plots_dir(subdir)
        plt.figure()
        for k in keys:
            epochs = [row["epoch"] for row in self.metrics if k in row]
            values = [row[k] for row in self.metrics if k in row]
            plt.plot(epochs, values, marker="o", label=k[: -len("_hessian_mean")])
        plt.xlabel("Epoch")
        plt.ylabel("Mean diagonal Hessian")
        plt.yscale("symlog", linthresh=1e-6)
        plt.title(f"Hessian vs Epochs ({self.tag})")
        if keys:
            plt.legend()
        plt.tight_layout()
        path = outdir / f"hessian_{self.tag}.png"
        plt.savefig(path, dpi=160)
        plt.close()
        return str(path)
