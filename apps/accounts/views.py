from django.contrib.auth import login
from django.contrib.auth.forms import UserCreationForm
from django.contrib.auth.views import LoginView
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods


class SignInView(LoginView):
    template_name = 'accounts/sign_in.html'
    redirect_authenticated_user = True


@require_http_methods(["GET", "POST"])
def sign_up(request):
    """Create an account and sign the new user in."""
    if request.user.is_authenticated:
        return redirect('catalog:home')

    form = UserCreationForm(request.POST or None)
    if request.method == 'POST' and form.is_valid():
        user = form.save()
        login(request, user)
        return redirect('catalog:home')

    return render(request, 'accounts/sign_up.html', {'form': form})
