"""Known frontend frameworks and their setup documentation links."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Framework:
    """A framework clyro can detect in a project."""

    name: str
    label: str
    installation: str
    tailwind: str

    @property
    def is_supported(self) -> bool:
        return self.name != "manual"


_TAILWIND_DOCS = "https://tailwindcss.com/docs/installation"

FRAMEWORKS: dict[str, Framework] = {
    "next-app": Framework(
        name="next-app",
        label="Next.js",
        installation="https://ui.shadcn.com/docs/installation/next",
        tailwind="https://tailwindcss.com/docs/guides/nextjs",
    ),
    "next-pages": Framework(
        name="next-pages",
        label="Next.js",
        installation="https://ui.shadcn.com/docs/installation/next",
        tailwind="https://tailwindcss.com/docs/guides/nextjs",
    ),
    "remix": Framework(
        name="remix",
        label="Remix",
        installation="https://ui.shadcn.com/docs/installation/remix",
        tailwind="https://tailwindcss.com/docs/guides/remix",
    ),
    "react-router": Framework(
        name="react-router",
        label="React Router",
        installation="https://ui.shadcn.com/docs/installation/react-router",
        tailwind="https://tailwindcss.com/docs/installation/framework-guides/react-router",
    ),
    "vite": Framework(
        name="vite",
        label="Vite",
        installation="https://ui.shadcn.com/docs/installation/vite",
        tailwind="https://tailwindcss.com/docs/guides/vite",
    ),
    "astro": Framework(
        name="astro",
        label="Astro",
        installation="https://ui.shadcn.com/docs/installation/astro",
        tailwind="https://tailwindcss.com/docs/guides/astro",
    ),
    "laravel": Framework(
        name="laravel",
        label="Laravel",
        installation="https://ui.shadcn.com/docs/installation/laravel",
        tailwind="https://tailwindcss.com/docs/guides/laravel",
    ),
    "tanstack-start": Framework(
        name="tanstack-start",
        label="TanStack Start",
        installation="https://ui.shadcn.com/docs/installation/tanstack",
        tailwind=_TAILWIND_DOCS,
    ),
    "gatsby": Framework(
        name="gatsby",
        label="Gatsby",
        installation="https://ui.shadcn.com/docs/installation/gatsby",
        tailwind="https://tailwindcss.com/docs/guides/gatsby",
    ),
    "expo": Framework(
        name="expo",
        label="Expo",
        installation="https://ui.shadcn.com/docs/installation/expo",
        tailwind="https://www.nativewind.dev/docs/getting-started/installation",
    ),
    "cra": Framework(
        name="cra",
        label="Create React App",
        installation="https://ui.shadcn.com/docs/installation/manual",
        tailwind=_TAILWIND_DOCS,
    ),
    "manual": Framework(
        name="manual",
        label="Manual",
        installation="https://ui.shadcn.com/docs/installation/manual",
        tailwind=_TAILWIND_DOCS,
    ),
}
