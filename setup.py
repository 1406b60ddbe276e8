from setuptools import setup


def readme():
    with open('README.rst') as f:
        return f.read()


setup(
    name='hubabuba',
    version='1.0.0',
    description='Subscriber side of the WebSub (PubSubHubbub) protocol',
    long_description=readme(),
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Internet :: WWW/HTTP',
    ],
    license='BSD',
    packages=[
        'hubabuba',
        'hubabuba.handlers',
        'hubabuba.integrations',
    ],
    python_requires='>=3.11',
    install_requires=[
        'requests>=2.31.0',
        'httpx>=0.27.0',
    ],
    extras_require={
        'flask': ['flask>=3.0.0'],
        'fastapi': ['fastapi>=0.110.0'],
        'test': [
            'pytest>=8.0.0',
            'pytest-asyncio>=0.23.0',
            'flask>=3.0.0',
            'fastapi>=0.110.0',
        ],
    },
    include_package_data=True,
    zip_safe=False)
