"""Named parameter bundles for ``FlowConfig.from_preset``."""

_SQUARE = {"width": 1080, "height": 1080}

PRESETS = {
    "ribbons": dict(
        _SQUARE,
        curve_style="extrusion", curve_direction="two-sided",
        noise="fbm", noise_scale=3.5, noise_factor=4.0, octaves=1,
        spacing=2.0, stroke_width=4.0, curve_length=150, density=50.0,
        size=200.0, grad_style="fiber",
        color_mode="palette", palette="royalty",
        background="light-grain",
    ),
    "ridges": dict(
        _SQUARE,
        curve_style="dots",
        noise="ridged", noise_scale=3.0, noise_factor=1.3, octaves=2,
        spacing=10.0, stroke_width=0.5, curve_length=55, density=100.0,
        size_fn="periodic", size=5.0, size_scale=3.0, min_size=1.0,
        anchor1=(111, 171, 181),
        background="dark-grain",
    ),
    "solar": dict(
        _SQUARE,
        curve_style="line",
        noise="curl", noise_scale=4.0, noise_factor=1.2,
        location="circle",
        spacing=5.0, stroke_width=2.0, curve_length=100, density=100.0,
        speed=0.1,
        color_mode="palette", palette="pinot-noir",
        background="light-clouds",
    ),
    "river_stones": dict(
        _SQUARE,
        curve_style="dots", dot_style="pearl", pearl_sides=5,
        pearl_smoothness=3,
        noise="cylinders", noise_scale=3.0, noise_factor=3.4,
        location="poisson",
        spacing=100.0, stroke_width=0.0, curve_length=1, density=45.0,
        size_fn="periodic", size=165.0, size_scale=5.0, min_size=25.0,
        anchor1=(45, 10, 65),
        background="color-grain",
    ),
    "vortex": dict(
        width=1000, height=1200,
        curve_style="extrusion", curve_direction="two-sided",
        noise="curl", noise_scale=3.0, noise_factor=1.0, octaves=1,
        location="halton",
        spacing=1.0, stroke_width=2.0, curve_length=200, density=72.0,
        size_fn="constant", size=80.0, grad_style="plain",
        color_mode="palette", palette="delta-blues",
        background="light-clouds",
    ),
    "canyon": dict(
        _SQUARE,
        curve_style="line",
        noise="fbm", noise_scale=3.0, noise_factor=2.0, octaves=6,
        location="poisson",
        spacing=5.0, stroke_width=2.5, curve_length=75, density=100.0,
        color_mode="palette", palette="rose",
        background="dark-grain",
    ),
    "fence": dict(
        _SQUARE,
        curve_style="extrusion", curve_direction="two-sided",
        noise="fbm", noise_scale=4.0, noise_factor=1.0, octaves=6,
        persistence=0.3,
        location="rand",
        spacing=15.0, stroke_width=12.5, curve_length=150, density=40.0,
        size_fn="periodic", size=200.0, size_scale=5.0, min_size=25.0,
        grad_style="plain",
        color_mode="palette", palette="algae",
        background="color-grain", grain_color=(152, 194, 152),
    ),
    "splat": dict(
        _SQUARE,
        curve_style="dots", curve_direction="two-sided", dot_style="pearl",
        pearl_sides=5, pearl_smoothness=3,
        noise="fbm", noise_scale=2.0, noise_factor=1.0, octaves=1,
        location="halton",
        spacing=7.0, stroke_width=0.0, curve_length=50, density=60.0,
        size_fn="periodic", size=40.0, size_scale=10.0, min_size=6.0,
        color_mode="palette", palette="gray-scale",
        background="light-grain",
    ),
    "tubes": dict(
        width=1000, height=1200,
        curve_style="dots", dot_stroke_color=(0, 0, 0),
        noise="value",
        location="lissajous",
        spacing=1.0, stroke_width=0.5, curve_length=15, density=85.0,
        size_fn="periodic", size=235.0, size_scale=3.0, min_size=10.0,
        color_mode="palette", palette="spirited-away",
        background="dark-clouds",
    ),
    "ducts": dict(
        curve_style="dots", dot_style="square", dot_stroke_color=(0, 0, 0),
        noise="sinusoidal", noise_scale=4.0, noise_factor=4.0,
        xfreq=2.0, yfreq=2.0, xexp=1.0, yexp=3.0,
        location="halton",
        spacing=2.0, stroke_width=0.5, curve_length=150, density=50.0,
        size_fn="periodic", size=100.0, size_scale=10.0, min_size=10.0,
        color_mode="palette", palette="fire",
        background="color-grain", grain_color=(195, 130, 65),
    ),
    "symmetry": dict(
        _SQUARE,
        curve_style="line",
        noise="gravity",
        location="rand",
        spacing=1.0, stroke_width=1.5, curve_length=100, density=100.0,
        color_mode="palette", palette="totoro",
        background="color-grain", grain_color=(215, 155, 190),
    ),
    "pompom": dict(
        _SQUARE,
        curve_style="line",
        noise="magnet",
        location="poisson",
        spacing=80.0, stroke_width=0.5, curve_length=25, density=100.0,
        color_mode="palette", palette="spirited-away",
        background="dark-grain",
    ),
    "red_dwarf": dict(
        _SQUARE,
        curve_style="extrusion", curve_direction="two-sided",
        noise="billow", noise_scale=3.5, noise_factor=4.0, octaves=1,
        location="circle",
        spacing=1.0, stroke_width=0.5, curve_length=180, density=65.0,
        speed=0.01,
        size_fn="contracting", size_dir="both", size=150.0, min_size=1.0,
        grad_style="plain",
        color_mode="palette", palette="porco-rosso",
        background="dark-clouds",
    ),
}
