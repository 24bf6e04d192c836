from setuptools import setup

setup(
    name='offscreen-canvas',
    version='0.1.0',
    description='Immediate-mode offscreen RGBA canvas for bitmaps, vector primitives and text',
    license='MIT',
    packages=['offscreen_canvas'],
    package_dir={'offscreen_canvas': 'src'},
    install_requires=[
                    'skia-python',
                    'colour',
                    'numpy',
                    'Pillow>=9.1'
                    ],
    extras_require={
                    'test': ['pytest']
                    },
    python_requires='>=3.10',

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3'
    ],
)
