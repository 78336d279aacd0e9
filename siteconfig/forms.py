from django import forms

from .models import ExperimentalFeature
from .utils import set_features_enabled


class ExperimentalFeaturesForm(forms.Form):
    """One checkbox per experimental feature, keyed (and id'd) by slug."""

    def __init__(self, *args, features=None, **kwargs):
        # Checkbox ids are the bare feature slugs, e.g. id="full-site-editing"
        kwargs.setdefault("auto_id", "%s")
        super().__init__(*args, **kwargs)
        self.features = list(
            features if features is not None else ExperimentalFeature.objects.all()
        )
        for feature in self.features:
            self.fields[feature.slug] = forms.BooleanField(
                label=feature.label,
                required=False,
                initial=feature.enabled,
                help_text=feature.description,
                widget=forms.CheckboxInput(attrs={"class": "form-check-input"}),
            )

    def save(self):
        """Persist the checked set. Returns the features whose state changed."""
        changed = [
            feature
            for feature in self.features
            if feature.enabled != bool(self.cleaned_data.get(feature.slug))
        ]
        for feature in changed:
            feature.enabled = not feature.enabled
        set_features_enabled([f.slug for f in changed if f.enabled], enabled=True)
        set_features_enabled([f.slug for f in changed if not f.enabled], enabled=False)
        return changed
